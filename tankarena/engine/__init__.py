"""Engine layer: frame loop, commands, pipeline state, materializers."""

from tankarena.engine.app import App
from tankarena.engine.commands import Commands
from tankarena.engine.pipeline import MapPipeline
from tankarena.engine.plugin import MapPlugin, build_app
from tankarena.engine.state import StateMachine

__all__ = ["App", "Commands", "MapPipeline", "MapPlugin", "StateMachine", "build_app"]
