import pytest

from core.emissions import MODE_KG_PER_KM, calculate_savings, mode_co2_kg, vehicle_co2_kg
from core.exceptions import EmissionFactorNotFoundError
from models.fleet import VehicleProfile
from models.routes import TravelMode
from services.emissions.factors import EmissionFactorTable


@pytest.mark.parametrize(
    "distance_km,vehicle,fuel,g_per_km",
    [
        (10.0, "car", "gasoline", 120.0),
        (37.3, "van", "diesel", 200.0),
        (0.0, "bus", "electric", 25.0),
        (3.7, "motorcycle", "gasoline", 75.0),
    ],
)
def test_vehicle_emissions_are_distance_times_factor(factor_table, distance_km, vehicle, fuel, g_per_km):
    profile = VehicleProfile(vehicle_type=vehicle, fuel_type=fuel)
    assert vehicle_co2_kg(distance_km, profile, factor_table) == distance_km * g_per_km / 1000


def test_car_gasoline_10km_is_1_2kg(factor_table):
    profile = VehicleProfile(vehicle_type="car", fuel_type="gasoline")
    assert vehicle_co2_kg(10.0, profile, factor_table) == pytest.approx(1.2)


def test_missing_factor_is_an_error_not_a_default(factor_table):
    profile = VehicleProfile(vehicle_type="truck", fuel_type="cng")
    with pytest.raises(EmissionFactorNotFoundError) as ei:
        vehicle_co2_kg(10.0, profile, factor_table)
    assert "truck" in str(ei.value) and "cng" in str(ei.value)


def test_inactive_factor_is_not_used():
    table = EmissionFactorTable.from_records(
        [{"vehicle_type": "car", "fuel_type": "diesel", "factor_g_per_km": 130.0, "is_active": False}]
    )
    with pytest.raises(EmissionFactorNotFoundError):
        vehicle_co2_kg(5.0, VehicleProfile(vehicle_type="car", fuel_type="diesel"), table)


@pytest.mark.parametrize("mode", ["walking", "cycling"])
@pytest.mark.parametrize("distance_km", [0.0, 1.0, 250.0])
def test_active_modes_emit_nothing(mode, distance_km):
    assert mode_co2_kg(distance_km, mode) == 0


@pytest.mark.parametrize(
    "mode,expected",
    [(TravelMode.transit, 0.5), ("carpool", 0.6), (TravelMode.driving, 1.2)],
)
def test_fixed_coefficients(mode, expected):
    assert mode_co2_kg(10.0, mode) == pytest.approx(expected)


def test_coefficient_table_values():
    assert MODE_KG_PER_KM == {
        "walking": 0.0,
        "cycling": 0.0,
        "transit": 0.05,
        "carpool": 0.06,
        "driving": 0.12,
    }


def test_unknown_mode_has_no_coefficient():
    with pytest.raises(KeyError):
        mode_co2_kg(1.0, "teleport")


def test_savings_never_negative():
    assert calculate_savings(1.2, 0.5) == pytest.approx(0.7)
    assert calculate_savings(0.5, 1.2) == 0.0


def test_emissions_estimate_endpoint(client):
    payload = {
        "legs": [
            # 10 km car/gasoline at 120 g/km => 1.2 kg
            {"distance_km": 10.0, "travel_mode": "driving", "vehicle": {"vehicle_type": "car", "fuel_type": "gasoline"}},
            # 4 km transit at 0.05 kg/km => 0.2 kg
            {"distance_km": 4.0, "travel_mode": "transit"},
            {"distance_km": 2.0, "travel_mode": "walking"},
        ]
    }
    r = client.post("/emissions/estimate", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["status"] == "success"
    assert data["table"] == "seed"
    assert abs(data["data"]["total_kg_co2"] - 1.4) < 1e-9
    assert data["data"]["per_leg_kg_co2"][2] == 0


def test_emissions_estimate_unknown_vehicle(client):
    payload = {
        "legs": [
            {"distance_km": 10.0, "vehicle": {"vehicle_type": "truck", "fuel_type": "cng"}},
        ]
    }
    r = client.post("/emissions/estimate", json=payload)
    assert r.status_code == 422
    assert "No emission factor" in r.json()["detail"]


def test_emissions_estimate_rejects_vehicle_on_walking_leg(client):
    payload = {
        "legs": [
            {"distance_km": 1.0, "travel_mode": "walking", "vehicle": {"vehicle_type": "car"}},
        ]
    }
    r = client.post("/emissions/estimate", json=payload)
    assert r.status_code == 422


def test_factor_listing(client):
    r = client.get("/emissions/factors")
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["units"] == "gCO2/km"
    keys = {(f["vehicle_type"], f["fuel_type"]) for f in data["factors"]}
    assert ("car", "gasoline") in keys
    assert ("truck", "cng") not in keys
    assert data["mode_kg_per_km"]["transit"] == 0.05
