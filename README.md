# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an input file and the second writes to an output file. It does the same as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

This counts the lines of `input.txt` that contain `error` and writes the count to `count.txt`.

The same entry point can also be started with `python -m pipex.pipeline`.

### Behaviour

- Exactly four arguments are required. With any other number, `Invalid number of arguments.` is printed on standard error and the exit status is 1.
- The input file is opened read-only. The output file is opened read-write, created with mode `0644` if it is missing, and truncated if it exists. If either cannot be opened, a message such as `Infile: No such file or directory` is printed and the exit status is 127. A failure to create the pipe is reported the same way, as `Pipe: ...`.
- The `PATH` value is the part after the first five characters of the first environment entry whose name begins with `PATH`. If there is no such entry, `no PATH entry in the environment` is printed and the exit status is 1.
- Each command string is split on spaces. Runs of spaces count as one separator. No shell quoting or expansion is done.
- The program name is looked up as `directory/name` in each `PATH` directory, in order. The first path that exists is used. It only has to exist, not be executable.
- If a command is empty or cannot be found, `Command not found` is printed on standard error. That side of the pipeline counts as status 127, and the other command still runs. If a found program cannot be started, `<command>: <reason>` is printed instead.
- Both commands run at the same time, and `pipex` waits for both. Once the files and the pipe are set up, `pipex` exits with status 0 whatever the commands return.

## Library use

```python
from pipex.pipeline import Pipeline
from pipex.search import find_path, resolve_command, split_words

directories = split_words(find_path({"PATH": "/usr/bin:/bin"}), ":")
print(resolve_command(directories, "ls"))   # e.g. /usr/bin/ls, or None

statuses = Pipeline("input.txt", "grep error", "wc -l", "count.txt").run()
print(statuses)   # exit statuses of both commands, e.g. [0, 0]
```

`pipex.search`:

- `split_words(text, sep)` splits on a single-character separator and drops empty words.
- `find_path(environ)` takes either a mapping or a sequence of `KEY=VALUE` strings. It raises `PathNotFoundError` if there is no `PATH` entry.
- `resolve_command(directories, name)` returns the first existing `directory/name`, or `None`.

`pipex.pipeline`:

- `Pipeline(infile, first, second, outfile).run(environ=None)` runs the two commands against `environ`, or against `os.environ` if it is not given. It returns a list of their two exit statuses. File and pipe failures raise `PipexError`, which carries an `exit_status` attribute. `CommandNotFoundError` is a subclass of it.
- `main(argv=None)` is the entry point of the `pipex` command and returns its exit status.

## Limits

Only two commands are supported. There is no way to chain more commands, no here-document input, and no append mode for the output file.

## Running the tests

```sh
pip install ".[test]"
pytest
```