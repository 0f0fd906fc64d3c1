import sys
from garage import Player, Car, Motorcycle, Bicycle
import rpc


def run_demo(out=None):
    car = Car()
    motorcycle = Motorcycle()
    bicycle = Bicycle()

    player = Player()

    # same player, three different vehicles
    for vehicle in (car, motorcycle, bicycle):
        player.set_vehicle(vehicle)
        player.drive(out)


def play():
    from garage import playground

    # Start Discord RPC (prints and carries on if unavailable)
    rpc.start()
    try:
        playground.run(presence=rpc)
    finally:
        rpc.shutdown()


def main(argv=None, out=None):
    if argv is None:
        argv = sys.argv[1:]
    if '--play' in argv:
        play()
    else:
        run_demo(out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
