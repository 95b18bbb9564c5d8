# Export the static catalog for easy imports
from .programs import SCHOLARSHIP_PROGRAMS

__all__ = ["SCHOLARSHIP_PROGRAMS"]
