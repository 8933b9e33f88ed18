# tests/unit/services/shipping/test_rate_engine.py
import pytest

from app.core.enums import ServiceType
from app.services.shipping.base import CarrierProfile, TransitDays
from app.services.shipping.data import DEFAULT_CARRIERS
from app.services.shipping.factory import get_carrier, carrier_names
from app.services.shipping.rate_engine import (
    JITTER_MAX,
    JITTER_MIN,
    RateEngine,
    calculate_shipping_rates,
    fixed_jitter,
    format_transit,
    is_international,
    pre_jitter_price,
    round_price,
    uniform_jitter,
)


def make_carrier(name, base_price=10, international_multiplier=1.0, weight_multiplier=0.0, domestic=1, international=3):
    return CarrierProfile(
        name=name,
        base_price=base_price,
        international_multiplier=international_multiplier,
        weight_multiplier=weight_multiplier,
        transit_days=TransitDays(domestic=domestic, international=international),
    )


# --- Carrier table ---

def test_default_carrier_table_order():
    assert carrier_names() == ["DHL Express", "FedEx", "UPS", "Royal Mail", "DPD", "ParcelForce"]

def test_carrier_profiles_are_immutable():
    carrier = get_carrier("FedEx")
    with pytest.raises(AttributeError):
        carrier.base_price = 1

def test_get_carrier_unknown_name():
    with pytest.raises(ValueError, match="not supported"):
        get_carrier("Pigeon Post")

@pytest.mark.parametrize("overrides", [
    {"base_price": -1},
    {"international_multiplier": 0.5},
    {"weight_multiplier": -0.1},
    {"domestic": 0},
    {"international": 0},
])
def test_carrier_profile_rejects_invalid_parameters(overrides):
    with pytest.raises(ValueError):
        make_carrier("Broken", **overrides)

def test_engine_rejects_duplicate_carrier_names():
    with pytest.raises(ValueError, match="Duplicate"):
        RateEngine(carriers=[make_carrier("A"), make_carrier("A")])


# --- Pricing helpers ---

def test_country_comparison_is_exact():
    assert is_international("UK", "UK") is False
    assert is_international("UK", "uk") is True
    assert is_international("UK", "UK ") is True
    assert is_international("UK", "United Kingdom") is True

@pytest.mark.parametrize("weight", [0.5, 1, 3, 5])
def test_no_weight_surcharge_up_to_free_allowance(weight):
    for carrier in DEFAULT_CARRIERS:
        assert pre_jitter_price(carrier, False, weight) == carrier.base_price
        assert pre_jitter_price(carrier, True, weight) == pytest.approx(
            carrier.base_price * carrier.international_multiplier
        )

def test_weight_surcharge_is_linear_above_allowance():
    for carrier in DEFAULT_CARRIERS:
        light = pre_jitter_price(carrier, True, 7)
        heavy = pre_jitter_price(carrier, True, 19.5)
        assert heavy - light == pytest.approx(12.5 * carrier.weight_multiplier)

def test_fedex_international_pre_jitter_price():
    assert pre_jitter_price(get_carrier("FedEx"), True, 10) == pytest.approx(100.5)

@pytest.mark.parametrize("value,expected", [
    (2.675, 2.68),
    (1.005, 1.01),
    (100.5, 100.5),
    (19.999, 20.0),
    (12.344, 12.34),
])
def test_round_price_half_up(value, expected):
    assert round_price(value) == expected

@pytest.mark.parametrize("days,international,expected", [
    (1, False, "1 business day"),
    (2, False, "2 business days"),
    (3, True, "3-5 business days"),
    (7, True, "7-9 business days"),
])
def test_format_transit(days, international, expected):
    assert format_transit(days, international) == expected


# --- Jitter sources ---

def test_uniform_jitter_stays_in_range():
    draws = [uniform_jitter() for _ in range(1000)]
    assert all(JITTER_MIN <= draw <= JITTER_MAX for draw in draws)
    assert len(set(draws)) > 1

def test_fixed_jitter_returns_value():
    jitter = fixed_jitter(1.05)
    assert jitter() == 1.05
    assert jitter() == 1.05

def test_jitter_drawn_once_per_carrier(mocker):
    jitter = mocker.Mock(return_value=1.0)
    engine = RateEngine(jitter=jitter)

    engine.calculate_rates("UK", "FR", 2)

    assert jitter.call_count == len(DEFAULT_CARRIERS)


# --- calculate_rates ---

def test_one_quote_per_carrier_sorted_by_price(fixed_engine):
    quotes = fixed_engine.calculate_rates("UK", "DE", 12)

    assert sorted(q.carrier for q in quotes) == sorted(carrier_names())
    prices = [q.price for q in quotes]
    assert prices == sorted(prices)

def test_domestic_quotes(fixed_engine):
    quotes = fixed_engine.calculate_rates("UK", "UK", 3)

    assert [q.carrier for q in quotes] == ["Royal Mail", "DPD", "ParcelForce", "FedEx", "UPS", "DHL Express"]
    for quote in quotes:
        carrier = get_carrier(quote.carrier)
        assert quote.service == ServiceType.DOMESTIC.value == "Domestic Express"
        assert quote.estimated_days == carrier.transit_days.domestic
        assert quote.price == carrier.base_price

def test_domestic_transit_labels(fixed_engine):
    quotes = {q.carrier: q for q in fixed_engine.calculate_rates("UK", "UK", 1)}

    assert quotes["DHL Express"].transit == "1 business day"
    assert quotes["FedEx"].transit == "2 business days"

def test_international_quotes(fixed_engine):
    quotes = fixed_engine.calculate_rates("UK", "US", 10)

    assert [(q.carrier, q.price) for q in quotes] == [
        ("Royal Mail", pytest.approx(19.5)),
        ("DPD", pytest.approx(23.0)),
        ("ParcelForce", pytest.approx(29.25)),
        ("FedEx", pytest.approx(100.5)),
        ("UPS", pytest.approx(102.75)),
        ("DHL Express", pytest.approx(104.5)),
    ]
    for quote in quotes:
        carrier = get_carrier(quote.carrier)
        assert quote.service == "International Express"
        assert quote.estimated_days == carrier.transit_days.international
        assert quote.transit == f"{quote.estimated_days}-{quote.estimated_days + 2} business days"

@pytest.mark.parametrize("jitter,expected", [(0.9, 90.45), (1.1, 110.55)])
def test_fedex_price_at_jitter_bounds(jitter, expected):
    quotes = calculate_shipping_rates("UK", "US", 10, jitter=fixed_jitter(jitter))
    fedex = next(q for q in quotes if q.carrier == "FedEx")
    assert fedex.price == pytest.approx(expected)

def test_random_prices_stay_within_jitter_band():
    for _ in range(50):
        for quote in calculate_shipping_rates("UK", "UK", 3):
            base = get_carrier(quote.carrier).base_price
            assert base * JITTER_MIN - 0.01 <= quote.price <= base * JITTER_MAX + 0.01

@pytest.mark.parametrize("weight", [1e27, 1e100, 1e300])
def test_very_heavy_shipments_are_still_priced(fixed_engine, weight):
    quotes = fixed_engine.calculate_rates("UK", "US", weight)

    assert len(quotes) == len(DEFAULT_CARRIERS)
    for quote in quotes:
        carrier = get_carrier(quote.carrier)
        assert quote.price == pytest.approx(pre_jitter_price(carrier, True, weight))

def test_round_price_beyond_default_decimal_precision():
    assert round_price(1.5e27) == pytest.approx(1.5e27)
    assert round_price(1e308) == pytest.approx(1e308)

def test_ties_keep_carrier_table_order():
    carriers = [make_carrier("Zeta", base_price=10), make_carrier("Alpha", base_price=10), make_carrier("Cheap", base_price=5)]
    quotes = calculate_shipping_rates("UK", "UK", 1, carriers=carriers, jitter=fixed_jitter(1.0))

    assert [q.carrier for q in quotes] == ["Cheap", "Zeta", "Alpha"]

def test_identical_inputs_give_identical_quotes_without_jitter(fixed_engine):
    first = [q.model_dump(by_alias=True) for q in fixed_engine.calculate_rates("UK", "US", 7.5)]
    second = [q.model_dump(by_alias=True) for q in fixed_engine.calculate_rates("UK", "US", 7.5)]

    assert first == second

def test_quote_serialises_estimated_days_alias(fixed_engine):
    quote = fixed_engine.calculate_rates("UK", "UK", 1)[0]

    assert set(quote.model_dump(by_alias=True)) == {"carrier", "service", "price", "transit", "estimatedDays"}
