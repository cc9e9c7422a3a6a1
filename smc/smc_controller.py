import serial
import threading
import logging
from . import config, utils, transport
from .transport import SmcSerialError

class SmcController:
    def __init__(self, ser=None, device_number=None):
        """
        ser: an already open serial handle (anything with write/read), or None
             and call connect() later.
        device_number: None for the compact protocol, otherwise the device
             number used to address the controller with the Pololu protocol.
        """
        self.ser = ser
        self.device_number = device_number
        self.lock = threading.Lock()
        self.port = None

    @property
    def is_connected(self):
        return self.ser is not None and getattr(self.ser, "is_open", True)

    def connect(self, port, baud=config.SERIAL_BAUDRATE, timeout=config.SERIAL_TIMEOUT_S):
        """
        Open the virtual COM port in raw binary mode.
        Raises SmcSerialError on failure.
        """
        if self.ser is not None:
            self.disconnect()

        self.port = port
        self.ser = transport.open_port(port, baud, timeout)
        logging.info(f"Connected to SMC on {port}.")
        return True

    def disconnect(self):
        with self.lock:
            transport.close_port(self.ser)
            self.ser = None

    def _discard_input(self):
        """Internal: drop stale bytes, e.g. the late tail of a reply that timed out."""
        reset = getattr(self.ser, "reset_input_buffer", None)
        if reset is None:
            return
        try:
            reset()
        except (serial.SerialException, OSError) as e:
            logging.error(f"error flushing input: {e}")
            raise SmcSerialError(f"Input flush failed: {e}") from e

    def _write(self, command):
        """
        Internal: send the whole command in a single write.
        A short write is a failure of the whole operation.
        """
        if not self.is_connected:
            raise SmcSerialError("SMC not connected")

        logging.debug(f"TX: {utils.hex_bytes(command)}")
        try:
            written = self.ser.write(command)
        except (serial.SerialException, OSError) as e:
            logging.error(f"error writing: {e}")
            raise SmcSerialError(f"Write failed: {e}") from e

        if written != len(command):
            logging.error(f"error writing: sent {written} of {len(command)} bytes")
            raise SmcSerialError(f"Short write: {written} of {len(command)} bytes")

    def _read(self, count):
        """Internal: one read attempt, expecting exactly count bytes."""
        try:
            response = self.ser.read(count)
        except (serial.SerialException, OSError) as e:
            logging.error(f"error reading: {e}")
            raise SmcSerialError(f"Read failed: {e}") from e

        if response is None or len(response) != count:
            got = 0 if response is None else len(response)
            logging.error(f"error reading: expected {count} bytes, got {got}")
            raise SmcSerialError(f"Expected to read {count} bytes, got {got}")

        logging.debug(f"RX: {utils.hex_bytes(response)}")
        return bytes(response)

    def get_variable(self, variable_id):
        """
        Read a controller variable as a number between 0 and 65535.
        variable_id must be one of the IDs listed in the "Controller
        Variables" section of the user's guide; it is not checked here.
        Signed variables need get_variable_signed().
        """
        command = utils.encode_get_variable(variable_id, self.device_number)

        # Lock entire I/O transaction
        with self.lock:
            if not self.is_connected:
                raise SmcSerialError("SMC not connected")
            # Clear input buffer to remove stale data
            self._discard_input()
            self._write(command)
            response = self._read(config.VARIABLE_REPLY_LEN)

        return utils.decode_word(response)

    def get_variable_signed(self, variable_id):
        """Read a controller variable as a number between -32768 and 32767."""
        return utils.to_signed16(self.get_variable(variable_id))

    def get_target_speed(self):
        """Target speed (-3200 to 3200)."""
        return self.get_variable_signed(config.VAR_TARGET_SPEED)

    def get_speed(self):
        """Current speed (-3200 to 3200)."""
        return self.get_variable_signed(config.VAR_SPEED)

    def get_error_status(self):
        """
        Returns a number where each bit represents a different error, and
        the bit is 1 if the error is currently active.
        See the user's guide for definitions of the different error bits.
        """
        return self.get_variable(config.VAR_ERROR_STATUS)

    def get_errors_occurred(self):
        return self.get_variable(config.VAR_ERRORS_OCCURRED)

    def exit_safe_start(self):
        """
        Send Exit Safe Start. Required before the motor will be driven;
        the controller, not this class, enforces that.
        """
        with self.lock:
            self._write(utils.encode_exit_safe_start(self.device_number))
        logging.info("CMD: Exit Safe Start")

    def set_target_speed(self, speed):
        """
        Set the target speed (-3200 to 3200). Negative drives in reverse.
        Out of range values are sent as-is.
        """
        command = utils.encode_set_target_speed(speed, self.device_number)
        with self.lock:
            self._write(command)
        logging.info(f"CMD: Target Speed {speed}")

    def stop_motor(self):
        self.set_target_speed(0)
