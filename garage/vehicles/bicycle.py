from .core import Vehicle, register_vehicle, say


@register_vehicle('Bicycle')
class Bicycle(Vehicle):
	"""A bicycle. It still answers start_engine() so a Player can drive it
	like any other vehicle; the rider just pedals.
	"""

	def start_engine(self, out=None):
		say("Bicycles don't have engines. Just pedal.", out)

	def move(self, out=None):
		say("Driving a bicycle with 2 wheels", out)
