"""runtime switches, flipped by the command line driver
"""

# reference driver input
DEFAULT_SOURCE = '(8 + 4) * (9 * 2)'

LOCAL_ECHARTS = True

# deepest allowed parenthesis nesting, the parser and the visitors recurse once per level
MAX_NESTING = 32

SHOULD_LOG_TOKENS = False
SHOULD_LOG_PARSE = False
SHOULD_LOG_EVAL = False
