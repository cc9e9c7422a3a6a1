from . import config

def format_command(cmd, *data, device_number=None):
    """
    Build the bytes for one command.
    Compact protocol: [cmd, data...]
    Pololu protocol (device_number given): [0xAA, device, cmd & 0x7F, data...]
    """
    if device_number is None:
        header = [cmd]
    else:
        header = [config.POLOLU_HEADER, device_number, cmd & 0x7F]
    return bytes(header + list(data))

def split_speed(magnitude):
    """Split a speed magnitude (0-3200) into its low 5 bits and high 7 bits."""
    return magnitude & 0x1F, (magnitude >> 5) & 0x7F

def encode_get_variable(variable_id, device_number=None):
    return format_command(config.CMD_GET_VARIABLE, variable_id,
                          device_number=device_number)

def encode_exit_safe_start(device_number=None):
    return format_command(config.CMD_EXIT_SAFE_START, device_number=device_number)

def encode_set_target_speed(speed, device_number=None):
    """
    Negative speed -> Motor Reverse with the absolute value,
    otherwise Motor Forward.
    Range is not checked here; the controller expects -3200..3200.
    """
    if speed < 0:
        cmd = config.CMD_MOTOR_REVERSE
        speed = -speed
    else:
        cmd = config.CMD_MOTOR_FORWARD
    low, high = split_speed(speed)
    return format_command(cmd, low, high, device_number=device_number)

def decode_word(reply):
    """Little-endian 16-bit word: first byte low, second byte high."""
    return reply[0] + 256 * reply[1]

def to_signed16(value):
    """Reinterpret an unsigned 16-bit value as two's-complement."""
    if value >= 0x8000:
        value -= 0x10000
    return value

def hex_bytes(data):
    return " ".join(f"{b:02X}" for b in data)
