"""Engine-free rules for a virtual pet game: ages, animation, money, interaction, sprint physics, rhythm templates and a developer console."""

__version__ = "0.1.0"