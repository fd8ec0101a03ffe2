"""
System Parameters
=================
Logging and command line settings.
"""

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = '[%(levelname)s] [%(name)s]: %(message)s'
"""Format string handed to logging.basicConfig by the command line tool"""

LOG_LEVEL = 'WARNING'
"""Default log level for the command line tool"""

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')
"""Log levels accepted by --log-level"""

# =============================================================================
# OUTPUT
# =============================================================================

OUTPUT_PRECISION = 6
"""Significant digits used when printing positions and angles"""

ANGLE_UNIT = 'rad'
"""Suffix printed after every angle"""

# =============================================================================
# INTERACTIVE PROMPTS
# =============================================================================

PROMPT_SEGMENT_COUNT = 'How many lengths does your arm have? '
PROMPT_LENGTHS = 'Please enter the lengths below:'
PROMPT_START_FROM_POSITION = 'Would you like to start from a position (y/n)? '
PROMPT_ANGLES = 'Please enter angles in radians:'
PROMPT_TARGET = 'Please enter the position you want achieved:'
PROMPT_ITERATIONS = 'For how many iterations would you like to iterate the process for? '
PROMPT_PRECISION = ('Below what rate of change would you like to terminate '
                    'prematurely (put 0 if inapplicable)? ')

MESSAGE_UNREACHABLE = 'That is impossible.'
"""Printed when the target lies beyond the arm's full extension"""
