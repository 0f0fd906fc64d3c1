"""Vehicles package (collection of drivable variants).

Importing the package registers every variant, in this order: the generic
Vehicle, Car, Motorcycle, Bicycle.
"""
from .core import Vehicle, register_vehicle, get_vehicle_class, create_vehicle, vehicle_names
from .generic import GenericVehicle
from .car import Car
from .motorcycle import Motorcycle
from .bicycle import Bicycle

__all__ = [
    "Vehicle",
    "GenericVehicle",
    "Car",
    "Motorcycle",
    "Bicycle",
    "register_vehicle",
    "get_vehicle_class",
    "create_vehicle",
    "vehicle_names",
]
