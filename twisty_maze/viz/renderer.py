import pygame

from twisty_maze.core.grid import Grid


class Renderer:
    COLOR_BG = (0, 0, 0)
    COLOR_FLOOR = (20, 20, 20)
    COLOR_WALL = (127, 127, 127)
    COLOR_TEXT = (255, 255, 255)

    PADDING = 40
    ZOOM_SPEED = 1.1
    # Animate generation over roughly this many frames
    ANIMATION_FRAMES = 600
    STEPS_PER_FRAME = 1

    def __init__(self, grid: Grid, generator=None, width=1280, height=720, record=False):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        from twisty_maze.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        # Links present before the attached generator starts carving
        self.base_links = grid.link_count()
        if generator is not None:
            generator.report_every = max(1, grid.size() // self.ANIMATION_FRAMES)

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        available_w = self.screen_width - (self.PADDING * 2)
        available_h = self.screen_height - (self.PADDING * 2)

        zoom_x = available_w / self.grid.column_count()
        zoom_y = available_h / self.grid.row_count()
        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        total_w = self.grid.column_count() * self.cell_size
        total_h = self.grid.row_count() * self.cell_size
        self.offset_x = (self.screen_width - total_w) / 2
        self.offset_y = (self.screen_height - total_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Twisty Maze - {self.grid.row_count()}x{self.grid.column_count()}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def cell_origin(self, row: int, col: int):
        return int(col * self.cell_size + self.offset_x), int(row * self.cell_size + self.offset_y)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.ZOOM_SPEED
                else:
                    self.cell_size /= self.ZOOM_SPEED
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if event.buttons[0] or event.buttons[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        size = int(self.cell_size)
        left, top = self.cell_origin(0, 0)
        width = self.grid.column_count() * size
        height = self.grid.row_count() * size
        pygame.draw.rect(self.surface, self.COLOR_FLOOR, (left, top, width, height))

        # North and west walls belong to the neighbor's south/east state,
        # so only the outer border needs drawing separately.
        for row in self.grid.rows():
            for cell in row:
                px, py = left + cell.col * size, top + cell.row * size
                if cell.has_south_wall():
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                if cell.has_east_wall():
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)

        pygame.draw.line(self.surface, self.COLOR_WALL, (left, top), (left + width, top), 1)
        pygame.draw.line(self.surface, self.COLOR_WALL, (left, top), (left, top + height), 1)

    def link_total(self) -> int:
        if self.generator is None:
            return self.base_links
        return self.base_links + self.generator.step_count

    def hud_lines(self):
        fps = int(self.clock.get_fps()) if self.clock else 0
        status = "Done" if self.gen_finished else "Carving"
        return [
            f"FPS: {fps}",
            f"Size: {self.grid.row_count()}x{self.grid.column_count()} ({self.grid.size():,})",
            f"Links: {self.link_total()}",
            f"Status: {status}",
            "REC" if self.recorder.active else "",
        ]

    def draw_hud(self):
        for i, text in enumerate(self.hud_lines()):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step_generator(self, gen_iter):
        try:
            for _ in range(self.STEPS_PER_FRAME):
                next(gen_iter)
        except StopIteration:
            self.gen_finished = True

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            if gen_iter and not self.gen_finished:
                self.step_generator(gen_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        self.recorder.stop()
        pygame.quit()
