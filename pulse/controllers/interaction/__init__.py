"""Init file for interaction module."""

from pulse.controllers.interaction.controller import InputEvent, InteractionController

__all__ = ["InputEvent", "InteractionController"]
