"""Run the sample skill locally: python -m skillkit.sample"""

from ..main import start
from .app import skill

start(skill)
