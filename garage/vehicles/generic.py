from .core import Vehicle, register_vehicle, say


@register_vehicle('Vehicle')
class GenericVehicle(Vehicle):
	"""The plain vehicle: no particular way of starting, no wheel count."""

	def start_engine(self, out=None):
		say("Starting the engine of the vehicle.", out)

	def move(self, out=None):
		say("Driving a vehicle", out)
