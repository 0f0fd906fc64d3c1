from .core import Vehicle, register_vehicle, say


@register_vehicle('Car')
class Car(Vehicle):
	"""A four-wheeled car started with a key."""

	def start_engine(self, out=None):
		say("Starting the engine of the car with a key.", out)

	def move(self, out=None):
		say("Driving a car with 4 wheels", out)
