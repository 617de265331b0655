"""
Centralized constants for player import and role scoring.
"""

from collections import OrderedDict

# Attribute slots shared by the role catalogue and player exports.
# Short code (column header / dataset key) -> descriptive name.
ATTRIBUTE_SLOTS = OrderedDict([
    ("1v1", "one_v_one"),
    ("Acc", "acceleration"),
    ("Aer", "aerial_reach"),
    ("Agg", "aggression"),
    ("Agi", "agility"),
    ("Ant", "anticipation"),
    ("Bal", "balance"),
    ("Bra", "bravery"),
    ("Cmd", "command_of_area"),
    ("Cnt", "concentration"),
    ("Cmp", "composure"),
    ("Cro", "crossing"),
    ("Dec", "decisions"),
    ("Det", "determination"),
    ("Dri", "dribbling"),
    ("Fin", "finishing"),
    ("Fir", "first_touch"),
    ("Fla", "flair"),
    ("Han", "handling"),
    ("Hea", "heading"),
    ("Jum", "jumping_reach"),
    ("Kic", "kicking"),
    ("Ldr", "leadership"),
    ("Lon", "long_shots"),
    ("Mar", "marking"),
    ("OtB", "off_the_ball"),
    ("Pac", "pace"),
    ("Pas", "passing"),
    ("Pos", "positioning"),
    ("Ref", "reflexes"),
    ("Sta", "stamina"),
    ("Str", "strength"),
    ("Tck", "tackling"),
    ("Tea", "teamwork"),
    ("Tec", "technique"),
    ("Thr", "throwing"),
    ("TRO", "tendency_to_rush_out"),
    ("Vis", "vision"),
    ("Wor", "work_rate"),
    ("Cor", "corners"),
])

ATTRIBUTE_CODES = tuple(ATTRIBUTE_SLOTS.keys())

# Keys of a role record in the bundled dataset that are not weights
ROLE_NAME_KEY = "Role"
ROLE_CODE_KEY = "RoleCode"

MIN_ROLE_WEIGHT = 0
MAX_ROLE_WEIGHT = 20

# Attribute values are conventionally on a 1-20 scale
MAX_ATTRIBUTE_VALUE = 20.0

# Identity columns copied verbatim into the Player record
NAME_FIELD = "Name"
NATIONALITY_FIELD = "Nationality"
CLUB_FIELD = "Club"
POSITION_FIELD = "Position"
IDENTITY_FIELDS = (NAME_FIELD, NATIONALITY_FIELD, CLUB_FIELD, POSITION_FIELD)

# Placeholder the game writes for unknown or hidden values
MISSING_MARKER = "-"

# Columns feeding the derived attributes (not all of them are role slots)
PACE = "Pac"
ACCELERATION = "Acc"
WORK_RATE = "Wor"
STAMINA = "Sta"
SET_PIECE_ATTRIBUTES = ("Cor", "Fre", "Pen", "Thr")

MAX_PLAYERS = 20000

HTML_EXTENSIONS = (".html", ".htm")
CSV_EXTENSIONS = (".csv",)

# Keys added to externally supplied player records by score_selected
ROLE_SCORES_KEY = "roleScores"
BEST_ROLES_KEY = "bestRoles"

# Length of the best-role ranking attached to scored players
BEST_ROLES_COUNT = 5
