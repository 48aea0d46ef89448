from .config import Config, build_config
from .errors import FileTooBigError, ReindentError, ReplaceError
from .handler import handle_file, reindent_bytes
from .reindenter import reindent
from .scanner import LineRecord, line_markers, read_lines
from .writer import render_lines, write_lines
