import sys
import time
import logging
# Add project root to path
sys.path.append(".")

from smc import config
from smc.smc_controller import SmcController
from smc.transport import SmcSerialError

# NOTE: The Simple Motor Controller's Input Mode must be set to Serial/USB.

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    print("=== SMC Hardware Check ===")
    port = input(f"Enter COM port [{config.DEFAULT_DEVICE}]: ").strip() or config.DEFAULT_DEVICE

    ctrl = SmcController()

    print(f"Connecting to {port}...")
    try:
        ctrl.connect(port)
    except SmcSerialError as e:
        print(f"Connection Failed: {e}")
        return 1

    try:
        ctrl.exit_safe_start()

        print(f"Error status: 0x{ctrl.get_error_status():04x}")

        speed = ctrl.get_target_speed()
        print(f"Current Target Speed is {speed}.")
        time.sleep(9.0)

        new_speed = config.MAX_SPEED if speed <= 0 else -config.MAX_SPEED
        print(f"Setting Target Speed to {new_speed}.")
        ctrl.set_target_speed(new_speed)
        time.sleep(9.0)
    except SmcSerialError as e:
        print(f"Serial Error: {e}")
        return 1
    finally:
        # Never leave the motor running, even on Ctrl-C
        try:
            ctrl.stop_motor()
        except SmcSerialError as e:
            print(f"Failed to stop motor: {e}")
        ctrl.disconnect()
    return 0

if __name__ == "__main__":
    sys.exit(main())
