from showroom.utils.domains import (
    FuelType,
    OPTION_LISTS,
    Priority,
    VehicleStatus,
    check_in,
)


def test_check_in_lists_every_member_in_order():
    assert check_in("status", VehicleStatus) == "status in ('available','reserved','sold')"


def test_str_enum_members_compare_equal_to_their_value():
    assert Priority.high == "high"
    assert FuelType("electric") is FuelType.electric


def test_option_lists_cover_every_domain():
    assert OPTION_LISTS["emailStatus"] == ["new", "in_progress", "replied", "follow_up"]
    assert OPTION_LISTS["emailPriority"] == ["low", "medium", "high"]
    assert OPTION_LISTS["fuelType"] == ["gasoline", "diesel", "hybrid", "electric"]
    assert OPTION_LISTS["transmission"] == ["manual", "automatic"]
    assert set(OPTION_LISTS) == {
        "emailStatus",
        "emailPriority",
        "waitlistStatus",
        "vehicleStatus",
        "fuelType",
        "transmission",
        "userRole",
    }
