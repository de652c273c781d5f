# tim

`tim` keeps a list of named templates and copies them on demand. A template
can be a single file, a directory or a git repository URL. The list is kept
in `~/.timfile`, one source per line in the form `name=type,value`, where
`type` is `file`, `dir` or `git`. The file is created empty the first time it
is read.

## Installation

```
pip install .
```

This installs the `tim` command.

## Usage

```
tim <cmd> [options] [-f PATH | --file PATH] [-d PATH | --dir PATH | --directory PATH] [-g URL | --git URL]
```

Run `tim` with no arguments, or `tim help`, to print the usage summary.

Commands:

| command          | what it does                                         |
|------------------|------------------------------------------------------|
| `add NAME ...`   | add a template, asking before replacing one          |
| `edit`, `set`    | change (or create) a template after confirmation     |
| `list`, `ls`     | list templates and their sources, sorted by name     |
| `rm NAME`        | remove a template after confirmation                 |
| `copy`, `plate`  | copy a template's source to a given path             |
| `help`           | show the help text                                   |
| `testwrite`      | overwrite `~/.timfile` with three sample sources     |

Flags:

- `-f PATH`, `--file PATH`: the source is a file; the path must exist
- `-d PATH`, `--dir PATH`, `--directory PATH`: the source is a directory; the
  path must exist
- `-g URL`, `--git URL`: the source is a git repository
- `--filter-git`: when copying, leave out the `.git` directory
- `--debug`: print the parsed command and its flags before running it

Only one of `--file`, `--dir` and `--git` may be given. When none is given to
`add` or `set`, the third argument is taken as a git URL
(`tim set NAME URL`). File and directory paths are stored as absolute,
normalised paths.

Confirmation questions accept `y` or `Y` as yes; anything else skips the
action. An unknown flag is reported and nothing is done; an unknown command
is reported on standard error and `tim` exits with status 2.

## Examples

```
tim add webapp --dir ./skeletons/webapp
tim add notes --file ~/templates/notes.md
tim set lib https://git.example.com/templates/lib.git
tim ls
tim plate webapp ./new-project
tim plate notes ./docs
tim plate lib ./new-lib --filter-git
tim rm notes
```

When a file source is copied to an existing directory, the file is placed
inside it under its own name. Directory copies are recursive and keep file
permissions.

Copying a git source runs `git clone`, so `git` must be installed and on your
`PATH`. With `--filter-git`, the source is first cloned or copied to a `tim`
directory under the system temporary directory, its `.git` directory is
removed, the result is copied to the destination, and the temporary directory
is deleted.

## Limitations

- `tim` cannot check that a git URL is correct or readable; you are warned
  when one is added with `--git`.
- A name or value containing `=` or `,` cannot be stored: such lines in
  `~/.timfile` are reported as improperly formatted and skipped.
- There is no way to choose a different location for the list than
  `~/.timfile` from the command line.

## Library use

The pieces can be used from Python as well:

- `tim.timfile`: `read()` and `write()` of the source list (both take an
  optional path), `parse_line()`, `format_source()` and the `Source` class.
- `tim.files`: `copy_file()`, `copy_dir()`, `git_clone()`, `temp_copy()`,
  `temp_git()` and `clean_tmp()`.
- `tim.cli`: `parse_args()`, which turns an argument list into a `Command`
  with `options` and `flags`, raising `InvalidFlagError` for unknown flags.
- `tim.main.main(argv)`: runs the command with the given arguments and
  returns its exit status.

## Development

```
pip install -e ".[test]"
pytest
```