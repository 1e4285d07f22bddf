"""Paging through the tutorial screenshots."""

from __future__ import annotations

from pathlib import PurePosixPath

IMAGE_DIR = "../external/Resources/Textures/Tutorial1.2/"
IMAGE_COUNT = 6


class TutorialPager:
    """Tracks which tutorial screenshot is shown."""

    def __init__(self, directory: str = IMAGE_DIR, count: int = IMAGE_COUNT) -> None:
        if count < 1:
            raise ValueError("a tutorial needs at least one image")
        self.directory = directory
        self.count = count
        self.index = 0

    def image_paths(self) -> list[str]:
        """Paths of every screenshot, in order."""
        return [str(PurePosixPath(self.directory) / f"Screenshot{i}.png") for i in range(self.count)]

    @property
    def current(self) -> str:
        """Path of the screenshot on display."""
        return self.image_paths()[min(max(self.index, 0), self.count - 1)]

    def next(self) -> None:
        # The index may step one past the last image, as the pages are counted.
        self.index = min(max(self.index + 1, 0), self.count)

    def previous(self) -> None:
        self.index = min(max(self.index - 1, 0), self.count)