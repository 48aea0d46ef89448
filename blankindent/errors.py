from dataclasses import dataclass


class ReindentError(Exception):
    pass


@dataclass
class FileTooBigError(ReindentError):
    path: str
    size: int
    limit: int

    def __str__(self):
        return f"file too big ({self.size} > {self.limit} bytes)"


@dataclass
class ReplaceError(ReindentError):
    path: str
    temp_path: str
    cause: OSError

    def __str__(self):
        return f"could not replace original, output left in {self.temp_path}: {self.cause}"
