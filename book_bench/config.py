from dataclasses import dataclass, field
from pathlib import Path

WAR_AND_PEACE_URL = "https://www.gutenberg.org/files/2600/2600-0.txt"
MOBY_DICK_URL = "https://www.gutenberg.org/files/2701/2701-0.txt"

N_BOOKS = 2


@dataclass(frozen=True)
class BookSource:
    name: str
    url: str
    cache_path: Path
    single_output: Path
    multi_output: Path


@dataclass
class BenchConfig:
    data_dir: Path
    output_dir: Path
    books: tuple[BookSource, ...] = field(default_factory=tuple)

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        self.output_dir = Path(self.output_dir)
        self.books = tuple(self.books)
        assert len(self.books) == N_BOOKS, f"Expected {N_BOOKS} books, got {len(self.books)}"
        paths = [p for b in self.books for p in (b.cache_path, b.single_output, b.multi_output)]
        assert len(set(paths)) == len(paths), f"Cache and output paths must be distinct: {paths}"

    def single_pairs(self) -> list[tuple[Path, Path]]:
        return [(b.cache_path, b.single_output) for b in self.books]

    def multi_pairs(self) -> list[tuple[Path, Path]]:
        return [(b.cache_path, b.multi_output) for b in self.books]


def book_source(name: str, url: str, data_dir: Path, output_dir: Path) -> BookSource:
    return BookSource(
        name=name,
        url=url,
        cache_path=data_dir / f"{name}.txt",
        single_output=output_dir / f"{name}_SINGLE.txt",
        multi_output=output_dir / f"{name}_MULTI.txt",
    )


def default_config(data_dir="data", output_dir="output") -> BenchConfig:
    data_dir, output_dir = Path(data_dir), Path(output_dir)
    return BenchConfig(
        data_dir=data_dir,
        output_dir=output_dir,
        books=(
            book_source("book1", WAR_AND_PEACE_URL, data_dir, output_dir),
            book_source("book2", MOBY_DICK_URL, data_dir, output_dir),
        ),
    )


def prepare_dirs(config: BenchConfig) -> None:
    config.data_dir.mkdir(parents=True, exist_ok=True)
    config.output_dir.mkdir(parents=True, exist_ok=True)
