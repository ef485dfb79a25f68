# pipex

`pipex` runs two commands joined by a pipe. The first command reads its
input from a file, and the second command writes its output to a file.

    pipex infile "cmd1 args" "cmd2 args" outfile

behaves like the shell line

    < infile cmd1 args | cmd2 args > outfile

## Installation

    pip install .

## Usage

    pipex input.txt "grep hello" "wc -l" count.txt

- Exactly four arguments are expected. With any other number, the command
  does nothing and exits with status 0.
- Each command is split into words on spaces. Runs of spaces count as one
  separator. Quotes and escapes are not understood.
- If the first word contains `/`, it is used as a path when it is readable
  and executable. Otherwise the directories listed in `PATH` are searched
  in order.
- The input file is opened for reading. The output file is created if
  needed and truncated.
- A stage that cannot open its file or find its command reports the
  problem on standard error and counts as finished with status 1. The other
  stage still runs.
- The exit status is that of the stage that finished last. A command killed
  by a signal counts as 128 plus the signal number.

## Library use

The pipeline can also be run from Python:

```python
import os
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep hello", "wc -l", "count.txt", dict(os.environ))
```

`env` defaults to `os.environ`.

Related functions and exceptions:

- `pipex.pipeline.open_file(path, for_output)` returns a raw file descriptor.
- `pipex.paths.find_command(cmd, env)` looks up an executable.
- `pipex.paths.candidate(cmd, directory)` checks a single directory.
- Failures are described by the exceptions in `pipex.errors`:
  - `EmptyCommandError`
  - `CommandNotFoundError`
  - `FileOpenError`

  All of them are subclasses of `PipexError`.

### Helpers

The package also carries small utilities:

- `pipex.chars` holds ASCII classification and case mapping, plus `atoi` and `itoa` with signed 32-bit behaviour.
- `pipex.textops` holds `split`, `strtrim`, `substr`, `strnstr`, `strstr`, `strncmp`, `memcmp`, `strchr` and `strrchr`. The search functions return an index or `None`.
- `pipex.printf` holds `format_string(fmt, *args)` and `printf(fmt, *args, stream=None)`. They support `%c %s %d %i %u %x %X %p %%`.
- `pipex.output` holds `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd`, which write to a file descriptor.
- `pipex.lines.LineReader` reads a descriptor or binary stream in chunks. It yields lines as bytes, each with its trailing newline.

## Limitations

- Only two commands are joined. Longer pipelines are not supported.
- There is no here-document mode and no append mode for the output file.
- No shell is involved, so globbing, variables and quoting are not
  interpreted.

## Running the tests

    pip install .[test]
    pytest