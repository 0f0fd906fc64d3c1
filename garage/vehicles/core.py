import sys
from abc import ABC, abstractmethod

# Registry of drivable vehicle classes, filled at import time
_VEHICLE_REGISTRY = {}


def register_vehicle(name):
    """Decorator to register a vehicle class under a name.

    Usage:
        @register_vehicle('Car')
        class Car(Vehicle): ...
    """
    def _decorator(cls):
        cls.name = name
        _VEHICLE_REGISTRY[name] = cls
        return cls

    return _decorator


def get_vehicle_class(name):
    return _VEHICLE_REGISTRY.get(name)


def vehicle_names():
    """Registered names, in the order their modules registered them."""
    return list(_VEHICLE_REGISTRY)


def create_vehicle(name):
    """Create an instance of a registered vehicle by name.

    Returns None if the name is unknown.
    """
    cls = get_vehicle_class(name)
    if cls is None:
        return None
    return cls()


def say(message, out=None):
    # resolve stdout at call time so capture/redirect keeps working
    if out is None:
        out = sys.stdout
    print(message, file=out)


class Vehicle(ABC):
    """The drivable capability.

    Every vehicle exposes start_engine() and move(), each writing one line
    to `out` (stdout when omitted). Not instantiable itself: the plain
    vehicle is GenericVehicle.
    """

    name = None

    @abstractmethod
    def start_engine(self, out=None): ...

    @abstractmethod
    def move(self, out=None): ...

    def __repr__(self):
        return f"<{type(self).__name__}>"
