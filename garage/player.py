class UnassignedVehicle(RuntimeError):
    """Raised when a Player is asked to drive before it has a vehicle."""

    def __init__(self, message="No vehicle assigned; call set_vehicle() first"):
        super().__init__(message)


def _check_drivable(vehicle):
    for attr in ('start_engine', 'move'):
        if not callable(getattr(vehicle, attr, None)):
            raise TypeError(f"{vehicle!r} is not a vehicle (missing {attr}())")


class Player:
    """Drives whichever vehicle it currently holds.

    The player never owns its vehicle: set_vehicle() just swaps the
    reference, and drive() always goes to the most recent one. Pass a
    vehicle to the constructor to skip the unassigned state.

    Not locked; callers sharing a Player across threads must serialize
    set_vehicle()/drive() themselves.
    """

    def __init__(self, vehicle=None):
        self._vehicle = None
        if vehicle is not None:
            self.set_vehicle(vehicle)

    @property
    def vehicle(self):
        return self._vehicle

    @property
    def is_assigned(self):
        return self._vehicle is not None

    def set_vehicle(self, vehicle):
        _check_drivable(vehicle)
        self._vehicle = vehicle

    def drive(self, out=None):
        vehicle = self._vehicle
        if vehicle is None:
            raise UnassignedVehicle()
        vehicle.start_engine(out)
        vehicle.move(out)
