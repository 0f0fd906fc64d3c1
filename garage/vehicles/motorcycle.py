from .core import Vehicle, register_vehicle, say


@register_vehicle('Motorcycle')
class Motorcycle(Vehicle):

	def start_engine(self, out=None):
		# kick start
		say("Starting the engine of the motorcycle with a kick.", out)

	def move(self, out=None):
		say("Driving a motorcycle with 2 wheels", out)
