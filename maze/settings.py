"""
Run configuration for maze generation and rendering
"""

from utils.constants import (
    DEFAULT_CELL_PIXELS, DEFAULT_GRID_SIZE, MAX_CELL_PIXELS, TEXT_RENDER_MAX_GRID_SIZE
)


class ConfigError(ValueError):
    """A run configuration the user has to correct"""


class MazeConfig:
    """Configuration for a single maze run"""
    def __init__(self, **kwargs):
        # Grid dimensions
        grid_size = kwargs.get('grid_size', DEFAULT_GRID_SIZE)
        width = kwargs.get('width')
        height = kwargs.get('height')
        self.width = grid_size if width is None else width
        self.height = grid_size if height is None else height

        # Maze generation
        self.render_command = kwargs.get('render_command', False)
        self.algorithm = kwargs.get('algorithm') or 'sidewinder'
        self.seed = kwargs.get('seed', None)
        self.mask_file = kwargs.get('mask_file', None)
        self.rebuild_walls = kwargs.get('rebuild_walls', 0)

        # Path end points, (x, y) tuples or None
        self.start_point = kwargs.get('start_point', None)
        self.end_point = kwargs.get('end_point', None)
        self.furthest_end_point = kwargs.get('furthest_end_point', False)

        # Text output
        self.text = kwargs.get('text', False)
        self.text_out = kwargs.get('text_out', None)
        self.show_distances = kwargs.get('show_distances', False)
        self.show_path = kwargs.get('show_path', False)

        # Image output
        self.image = kwargs.get('image', False)
        self.image_out = kwargs.get('image_out', None)
        self.cell_pixels = kwargs.get('cell_pixels', DEFAULT_CELL_PIXELS)
        self.colour_distances = kwargs.get('colour_distances', False)
        self.mark_start_end = kwargs.get('mark_start_end', False)
        self.screen_view = kwargs.get('screen_view', False)

        # Edge list output
        self.edges_out = kwargs.get('edges_out', None)

    @classmethod
    def from_args(cls, args):
        """Build a config from parsed command line arguments"""
        values = {k: v for k, v in vars(args).items() if v is not None}
        values['render_command'] = getattr(args, 'command', None) == 'render'
        for key in ('start_point', 'end_point'):
            if key in values:
                values[key] = tuple(values[key])
        return cls(**values)

    def validate(self):
        """
        Raises:
            ConfigError: describing the first invalid setting
        """
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"Grid size must be positive, got {self.width}x{self.height}")
        if not 1 <= self.cell_pixels <= MAX_CELL_PIXELS:
            raise ConfigError(f"Cell pixels must be between 1 and {MAX_CELL_PIXELS}")
        if self.rebuild_walls < 0:
            raise ConfigError("Cannot rebuild a negative number of walls")
        if self.show_distances and self.show_path:
            raise ConfigError("Show either distances or the path, not both")

    @property
    def wants_text(self):
        return bool(self.text or self.text_out)

    @property
    def wants_image(self):
        return bool(self.image or self.image_out)

    @property
    def any_render_option(self):
        return self.wants_text or self.wants_image

    @property
    def do_text_render(self):
        small = max(self.width, self.height) < TEXT_RENDER_MAX_GRID_SIZE
        return self.render_command and (self.wants_text or (not self.any_render_option and small))

    @property
    def do_image_render(self):
        large = max(self.width, self.height) >= TEXT_RENDER_MAX_GRID_SIZE
        return (not self.render_command) or self.wants_image or (not self.any_render_option and large)

    @property
    def requires_start_and_end_point(self):
        return (self.furthest_end_point or self.show_distances or self.show_path
                or self.colour_distances or self.mark_start_end)
