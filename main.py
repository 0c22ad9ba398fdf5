"""main"""
import logging
import sys
from typing import TextIO

from render import print_colored_lines
from tokens import word_counts

LOGGER = logging.getLogger('wordcolor')

INPUT_FILE = 'declaration.txt'


def read_file_content(path: str = INPUT_FILE) -> str:
    """Reads the whole file, relative to the working directory. OSError if it is missing."""
    # newline='' keeps \r and \r\n as they are; only \n breaks lines
    with open(path, 'rt', encoding='utf-8', newline='') as f:
        return f.read()


def process_file(path: str = INPUT_FILE, file: TextIO = None):
    content = read_file_content(path)
    counts = word_counts(content)
    LOGGER.info(f'READ {len(content)} CHARACTERS, {len(counts)} DISTINCT WORDS FROM {path}')
    print_colored_lines(content, counts, file=file)


def _configure_logging():
    logging.basicConfig(level='INFO', stream=sys.stderr, force=True,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def main() -> int:
    _configure_logging()
    try:
        process_file()
    except OSError as e:
        LOGGER.error(f'Cannot read {INPUT_FILE}: {e}')
        raise
    return 0


if __name__ == '__main__':
    sys.exit(main())
