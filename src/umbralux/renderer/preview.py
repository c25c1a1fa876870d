# renderer/preview.py
import pygame

from umbralux.renderer.canvas import Canvas
from umbralux.renderer.tone_mapping import to_rgb8


def canvas_to_surface(canvas: Canvas, scale: int = 1) -> pygame.Surface:
    """
    Converts the canvas to a pygame surface, optionally scaled up by an
    integer factor.
    """
    # surfarray uses the same [x, y] indexing as the canvas
    surface = pygame.surfarray.make_surface(to_rgb8(canvas.pixels))
    if scale != 1:
        surface = pygame.transform.scale(surface, (canvas.width * scale, canvas.height * scale))
    return surface


def show(canvas: Canvas, title: str = "umbralux", scale: int = 1):
    """
    Displays the canvas in a window until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width * scale, canvas.height * scale))
        pygame.display.set_caption(title)
        screen.blit(canvas_to_surface(canvas, scale), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
