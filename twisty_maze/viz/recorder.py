import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


class VideoRecorder:
    CODEC = "mp4v"
    OUTPUT_DIR = "recordings"

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = self.default_filename("maze")

    @classmethod
    def default_filename(cls, prefix: str) -> str:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        os.makedirs(cls.OUTPUT_DIR, exist_ok=True)
        return os.path.join(cls.OUTPUT_DIR, f"{prefix}_{ts}.mp4")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        width, height = surface.get_size()
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*self.CODEC)
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.debug(f"Recording started: {self.output_file}")
        elif (width, height) != self.frame_size:
            # VideoWriter silently drops frames of the wrong size
            surface = pygame.transform.scale(surface, self.frame_size)

        # surfarray is (width, height, 3) RGB, opencv wants (height, width, 3) BGR
        frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        self.writer.write(cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.debug(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
