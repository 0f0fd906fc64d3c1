"""garage: vehicles and the player that drives them.

Importers can use `from garage import Player, Car` directly.
"""
from .vehicles import Vehicle, GenericVehicle, Car, Motorcycle, Bicycle, create_vehicle, vehicle_names
from .player import Player, UnassignedVehicle

__all__ = [
    "Vehicle",
    "GenericVehicle",
    "Car",
    "Motorcycle",
    "Bicycle",
    "create_vehicle",
    "vehicle_names",
    "Player",
    "UnassignedVehicle",
]
