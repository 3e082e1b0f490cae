"""Constants and lookup tables for the golfcup scoring engine."""

HOLES_PER_ROUND = 18

# Stroke index per hole (1 = hardest hole, 18 = easiest)
STROKE_INDEX = [5, 13, 1, 9, 17, 3, 15, 7, 11, 6, 14, 2, 10, 18, 4, 16, 8, 12]

# Par per hole
HOLE_PARS = [4, 4, 3, 5, 4, 4, 3, 4, 5, 4, 4, 3, 5, 4, 4, 3, 4, 5]

TOTAL_PAR = sum(HOLE_PARS)

FRONT_NINE = range(0, 9)
BACK_NINE = range(9, 18)
ALL_HOLES = range(0, HOLES_PER_ROUND)

# Stableford points by net score relative to par; anything below -3 scores as -3,
# anything above +2 scores as +2
STABLEFORD_POINTS = {
    -3: 5,  # Albatross
    -2: 4,  # Eagle
    -1: 3,  # Birdie
    0: 2,  # Par
    1: 1,  # Bogey
    2: 0,  # Double bogey or worse
}

SCORE_TO_PAR_LABELS = {
    -3: 'albatross',
    -2: 'eagle',
    -1: 'birdie',
    0: 'par',
    1: 'bogey',
    2: 'double bogey+',
}

# Team identifiers
TEAM_A = 'team-a'
TEAM_B = 'team-b'
TEAM_IDS = (TEAM_A, TEAM_B)
TIE = 'tie'
TIED = 'tied'

# Fixed team colors
TEAM_COLORS = {
    TEAM_A: '#2563eb',  # Blue
    TEAM_B: '#dc2626',  # Red
}

# Competition formats
SINGLES = 'singles'
TEXAS_SCRAMBLE = 'texas-scramble'
HIGH_LOW = 'high-low'
FOURSOMES = 'foursomes'
FOURBALL = 'fourball'
CHAPMAN = 'chapman'
GAME_FORMATS = (SINGLES, TEXAS_SCRAMBLE, HIGH_LOW, FOURSOMES, FOURBALL, CHAPMAN)

# Scoring bases
STABLEFORD = 'stableford'
STROKEPLAY = 'strokeplay'
MATCHPLAY = 'matchplay'
SCORING_TYPES = (STABLEFORD, STROKEPLAY, MATCHPLAY)

FORMAT_DESCRIPTIONS = {
    SINGLES: 'Each player plays their own ball. 1 point per match.',
    TEXAS_SCRAMBLE: 'Team plays one ball together. Best shot selected each time.',
    HIGH_LOW: 'Best score = 2 points, Worst score = 1 point per hole.',
    FOURSOMES: 'Partners alternate shots with one ball.',
    FOURBALL: 'Each player plays own ball, best net score counts for team.',
    CHAPMAN: "Both drive, then switch and play partner's ball, then select best.",
}

# Players per side (min, max) for each format
SIDE_SIZES = {
    SINGLES: (1, 1),
    TEXAS_SCRAMBLE: (1, 2),
    HIGH_LOW: (2, 2),
    FOURSOMES: (2, 2),
    FOURBALL: (2, 2),
    CHAPMAN: (2, 2),
}

SCORING_DESCRIPTIONS = {
    STABLEFORD: 'Points based on score relative to par. Higher is better.',
    STROKEPLAY: 'Total strokes counted. Lower is better.',
    MATCHPLAY: 'Win individual holes. Most holes won wins match.',
}

DEFAULT_TEE = 'yellow'
DEFAULT_POINTS_PER_MATCH = 1.0
DEFAULT_TIE_POINTS = 0.5
