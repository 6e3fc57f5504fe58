"""API dependencies."""
from ..config import Settings, get_settings
from ..core.solver import WheelSolver, get_solver


def get_wheel_solver() -> WheelSolver:
    """Dependency for wheel solver."""
    return get_solver()


def get_app_settings() -> Settings:
    """Dependency for application settings."""
    return get_settings()
