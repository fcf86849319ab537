"""The game: state, input handling, weapon animation and the window loop."""

import sys
from dataclasses import dataclass

from .minimap import draw_minimap
from .player import Player
from .raycast import Raycaster, wall_height
from .render import FrameBuffer, draw_column, load_textures
from .scene import load_scene
from .settings import PP_HEIGHT, PP_WIDTH, Key, normalise_angle
from .tools import ParseError

MOUSE_TURN = 4
MINIMAP_POSITION = (50, 50)


@dataclass
class WeaponAnimation:
    """Counts frames of the firing animation, one weapon image per step."""

    frames_per_weapon: int = 700
    weapons: int = 35
    active: bool = False
    frame: int = 0
    weapon: int = 0
    current: int | None = None

    def start(self):
        """Begin firing."""
        self.active = True

    def tick(self):
        """Advance one frame; return True when the view must be redrawn."""
        self.frame %= self.frames_per_weapon * self.weapons
        self.weapon %= self.weapons
        if not self.active:
            return False
        redraw = False
        if self.frame == self.frames_per_weapon * self.weapon:
            self.current = self.weapon
            self.weapon += 1
            redraw = True
        if self.weapon == self.weapons:
            self.active = False
            redraw = True
        self.frame += 1
        return redraw


class Game:
    """A running scene: the map, the player and the images drawn of them."""

    def __init__(self, scene, textures, width=PP_WIDTH, height=PP_HEIGHT):
        self.scene = scene
        self.textures = textures
        self.raycaster = Raycaster(scene.rows, scene.width, scene.height)
        self.player = Player.from_start(scene.player)
        self.buffer = FrameBuffer(width, height)
        self.minimap = FrameBuffer(width // 5, height // 5)
        self.animation = WeaponAnimation()
        self.distance = 0.0
        self.running = True
        self._hold_x = 0

    def render(self):
        """Cast every column, draw the view and the minimap; return the view."""
        player = self.player
        header = self.scene.header
        hits = self.raycaster.cast_frame(player.angle, player.x, player.y, self.buffer.width)
        for pos, hit in enumerate(hits):
            draw_column(self.buffer, pos, hit, wall_height(hit.distance),
                        self.textures, header.ceiling, header.floor)
        if hits:
            self.distance = hits[-1].distance
        draw_minimap(self.minimap, self.raycaster, player.x, player.y,
                     player.angle, self.distance)
        return self.buffer

    def handle_key(self, key):
        """React to a key; return False once the game should end."""
        if key == Key.DESTROY:
            self.running = False
            return False
        self.player.handle_key(self.raycaster.grid, key, self.distance)
        if key == Key.SPACE and self.raycaster.door is not None:
            row, col = self.raycaster.door
            self.raycaster.grid[row][col] = "0"
        if key == Key.FIRE:
            self.animation.start()
        self.render()
        return True

    def mouse_move(self, x, y):
        """Turn the view as the pointer moves across the window."""
        if 0 < x < self.buffer.width and 0 < y < self.buffer.height:
            if self._hold_x < x:
                self.player.angle = normalise_angle(self.player.angle - MOUSE_TURN)
            if self._hold_x > x:
                self.player.angle = normalise_angle(self.player.angle + MOUSE_TURN)
            self._hold_x = x
            self.render()

    def tick(self):
        """Advance the animation; return True if the view was redrawn."""
        if self.animation.tick():
            self.render()
            return True
        return False


def _fail(message):
    print(f"Error\n{message}")
    return 1


def _show(pygame, screen, game):
    for buffer, position in ((game.buffer, (0, 0)), (game.minimap, MINIMAP_POSITION)):
        surface = pygame.image.frombuffer(
            buffer.to_bytes(), (buffer.width, buffer.height), "BGRA"
        ).convert()
        screen.blit(surface, position)
    pygame.display.flip()


def main(argv=None):
    """Open the scene file named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail("INVALID NUMBER OF ARGUMENTS")
    try:
        scene = load_scene(args[0])
        textures = load_textures(scene.header)
    except ParseError as exc:
        return _fail(str(exc))

    import pygame

    keys = {
        pygame.K_LEFT: Key.ARROW_LEFT,
        pygame.K_RIGHT: Key.ARROW_RIGHT,
        pygame.K_UP: Key.ARROW_UP,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_w: Key.UP,
        pygame.K_s: Key.DOWN,
        pygame.K_f: Key.FIRE,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_ESCAPE: Key.DESTROY,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((PP_WIDTH, PP_HEIGHT))
        pygame.display.set_caption("Cub3D")
        game = Game(scene, textures)
        game.render()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    game.handle_key(keys[event.key])
                elif event.type == pygame.MOUSEMOTION:
                    game.mouse_move(*event.pos)
            game.tick()
            _show(pygame, screen, game)
    finally:
        pygame.quit()
    sys.stderr.write("GAME OVER !!")
    return 0