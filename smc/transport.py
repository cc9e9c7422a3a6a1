import serial
import logging
from . import config

class SmcSerialError(IOError):
    """Open, write or read on the controller's serial port failed."""

def configure_raw_mode(ser):
    """
    Put an open port into raw binary mode: 8N1, no XON/XOFF, no RTS/CTS,
    no DSR/DTR. pyserial already runs the tty without line editing, echo,
    signals or CR/NL translation (binary mode on Windows), so bytes pass
    through unmodified.
    """
    ser.bytesize = serial.EIGHTBITS
    ser.parity = serial.PARITY_NONE
    ser.stopbits = serial.STOPBITS_ONE
    ser.xonxoff = False
    ser.rtscts = False
    ser.dsrdtr = False

    # Drop anything left over from a previous session
    ser.reset_input_buffer()
    ser.reset_output_buffer()

def open_port(device, baud=config.SERIAL_BAUDRATE, timeout=config.SERIAL_TIMEOUT_S):
    """
    Open the controller's virtual COM port and configure it for raw I/O.
    Raises SmcSerialError if the port cannot be opened.
    """
    logging.info(f"Opening {device} at {baud}...")
    ser = None
    try:
        ser = serial.Serial(device, baud, timeout=timeout)
        configure_raw_mode(ser)
        return ser
    except (serial.SerialException, OSError, ValueError) as e:
        logging.error(f"{device}: {e}")
        close_port(ser)
        raise SmcSerialError(f"Failed to open {device}: {e}") from e

def close_port(ser):
    if ser is not None and getattr(ser, "is_open", True):
        ser.close()
