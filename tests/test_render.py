import io

import pygame
import pytest

from solong.game import Direction, Game
from solong.mapfile import validate_map
from solong.render import TILE_SIZE, Renderer, Sprite, Textures, hud_items, tile_sprites

MAP = ["11111\n", "1PCE1\n", "11111\n"]


def make_game(frames=0):
    game = Game(validate_map(MAP), out=io.StringIO())
    game.frames = frames
    return game


def solid_textures():
    colors = {sprite: (10 + 20 * i, 100, 50, 255) for i, sprite in enumerate(Sprite)}
    images = {}
    for sprite, color in colors.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        images[sprite] = surface
    return Textures(images), colors


def test_walls_use_first_image_on_frame_zero():
    draws = tile_sprites(make_game(0))
    walls = [sprite for sprite, _ in draws if sprite in (Sprite.WALL, Sprite.WALL2)]
    assert len(walls) == 12
    assert set(walls) == {Sprite.WALL}


def test_walls_use_second_image_on_frame_four():
    draws = tile_sprites(make_game(4))
    assert Sprite.WALL2 in {sprite for sprite, _ in draws}
    assert Sprite.WALL not in {sprite for sprite, _ in draws}


def test_walls_skipped_between_animation_frames():
    draws = tile_sprites(make_game(1))
    assert {sprite for sprite, _ in draws} == {
        Sprite.GROUND,
        Sprite.PLAYER,
        Sprite.COIN,
        Sprite.DOOR,
    }


def test_objects_drawn_over_ground():
    draws = tile_sprites(make_game(1))
    coin_corner = (2 * TILE_SIZE, TILE_SIZE)
    at_coin = [sprite for sprite, corner in draws if corner == coin_corner]
    assert at_coin == [Sprite.GROUND, Sprite.COIN]


@pytest.mark.parametrize(
    "direction, sprite",
    [
        (Direction.FRONT, Sprite.PLAYER),
        (Direction.BACK, Sprite.PLAYER_BACK),
        (Direction.LEFT, Sprite.PLAYER_LEFT),
        (Direction.RIGHT, Sprite.PLAYER_RIGHT),
    ],
)
def test_player_sprite_follows_direction(direction, sprite):
    game = make_game(1)
    game.direction = direction
    assert (sprite, (TILE_SIZE, TILE_SIZE)) in tile_sprites(game)


def test_hud_items_show_moves_and_score():
    game = make_game()
    game.moves = 7
    game.score = 2
    items = hud_items(game)
    assert items[0][0] is Sprite.MOVES
    assert [item for item, _ in items[1:]] == ["7", "PROJECTS: ", "PROJECTS: ", "2"]
    baselines = {y for _, (_, y) in items[1:]}
    assert len(baselines) == 1
    xs = [x for _, (x, _) in items[1:]]
    assert xs == sorted(xs)


def test_textures_load_reads_xpm_files(tmp_path):
    xpm = '/* XPM */\nstatic char *img[] = {\n"2 2 2 1",\n"a c #FF0000",\n"b c None",\n"ab",\n"ba"\n};\n'
    for sprite in Sprite:
        (tmp_path / sprite.value).write_text(xpm)
    textures = Textures.load(tmp_path)
    surface = textures[Sprite.GROUND]
    assert surface.get_size() == (2, 2)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_textures_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Textures.load(tmp_path)


def test_renderer_draws_tiles():
    textures, colors = solid_textures()
    surface = pygame.Surface((5 * TILE_SIZE, 3 * TILE_SIZE))
    Renderer(surface, textures).draw(make_game(0))
    half = TILE_SIZE // 2
    assert tuple(surface.get_at((half, half))) == colors[Sprite.WALL]
    assert tuple(surface.get_at((TILE_SIZE + half, TILE_SIZE + half))) == colors[Sprite.PLAYER]
    assert tuple(surface.get_at((2 * TILE_SIZE + half, TILE_SIZE + half))) == colors[Sprite.COIN]
    assert tuple(surface.get_at((3 * TILE_SIZE + half, TILE_SIZE + half))) == colors[Sprite.DOOR]


def test_renderer_keeps_old_walls_between_frames():
    textures, colors = solid_textures()
    surface = pygame.Surface((5 * TILE_SIZE, 3 * TILE_SIZE))
    renderer = Renderer(surface, textures)
    renderer.draw(make_game(4))
    renderer.draw(make_game(5))
    half = TILE_SIZE // 2
    assert tuple(surface.get_at((half, half))) == colors[Sprite.WALL2]