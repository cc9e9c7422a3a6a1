# SMC Configuration Constants

# Serial Settings
SERIAL_BAUDRATE = 9600
SERIAL_TIMEOUT_S = None  # Transport read timeout; None blocks until the reply arrives
DEFAULT_DEVICE = "/dev/ttyACM0"  # Linux; e.g. "COM6" on Windows

# Command Codes (Compact protocol)
CMD_GET_VARIABLE    = 0xA1
CMD_EXIT_SAFE_START = 0x83
CMD_MOTOR_FORWARD   = 0x85
CMD_MOTOR_REVERSE   = 0x86
POLOLU_HEADER       = 0xAA  # Pololu protocol: [0xAA, device, cmd & 0x7F, ...]

# Controller Variables (IDs from the user's guide)
VAR_ERROR_STATUS           = 0
VAR_ERRORS_OCCURRED        = 1
VAR_SERIAL_ERRORS_OCCURRED = 2
VAR_LIMIT_STATUS           = 3
VAR_TARGET_SPEED           = 20
VAR_SPEED                  = 21
VAR_BRAKE_AMOUNT           = 22
VAR_INPUT_VOLTAGE          = 23
VAR_TEMPERATURE            = 24

# Limits
MAX_SPEED = 3200
VARIABLE_REPLY_LEN = 2
