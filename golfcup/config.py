"""Competition configuration management."""

from functools import lru_cache
from pathlib import Path

from .models import Course, PointsConfig
from .schemas import CompetitionConfig
from .stroke_table import TEES, Tee
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'competition_config.json'


@lru_cache(maxsize=1)
def get_config() -> CompetitionConfig:
    """
    Load competition configuration from data/competition_config.json.

    Configuration is cached after first load.

    Returns:
        CompetitionConfig object with validated settings

    Raises:
        FileNotFoundError: If competition_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from golfcup.config import get_config
        config = get_config()
        print(f"Points per match: {config.points_per_match}")
    """
    return load_json(CONFIG_PATH, schema=CompetitionConfig)


def get_points_config() -> PointsConfig:
    """Get points per match and tie points from config."""
    config = get_config()
    return PointsConfig(points_per_match=config.points_per_match, tie_points=config.tie_points)


def get_default_tee() -> str:
    """Get the tee used when a match does not name one."""
    return get_config().default_tee


def get_course() -> Course:
    """Get the configured course layout, or the built-in layout if none is configured."""
    course = get_config().course
    if course is None:
        return Course()
    return Course(name=course.name, pars=tuple(course.pars), stroke_index=tuple(course.stroke_index))


def get_tees() -> dict[str, Tee]:
    """
    Get every usable tee.

    Built-in tees keep their stroke tables, with ratings overridden by config.
    Tees only present in config have no table and always use the slope formula.
    """
    tees = dict(TEES)
    for name, tee_config in get_config().tees.items():
        builtin = TEES.get(name)
        tees[name] = Tee(
            name=name,
            course_rating=tee_config.course_rating,
            slope_rating=tee_config.slope_rating,
            par=tee_config.par,
            length=tee_config.length,
            bands=builtin.bands if builtin else (),
        )
    return tees


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
