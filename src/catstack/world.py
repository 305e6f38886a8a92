import random

from esper import World
from catstack.config import GameConfig
from catstack.constants import CAT_COLORS
from catstack.components.cat_palette import CatPalette
from catstack.components.game_state import GameState


def create_world(
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config or GameConfig())

    # Register the global game state resource.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState())

    # Single palette entity with the colors in play
    world.create_entity(
        CatPalette(
            colors=list(world.config.palette),
            rgb={name: CAT_COLORS[name] for name in world.config.palette if name in CAT_COLORS},
        ),
    )
    return world


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState resource not found")


def get_palette(world: World) -> CatPalette:
    for _, palette in world.get_component(CatPalette):
        return palette
    raise RuntimeError("CatPalette definitions not found")
