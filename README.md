# cmdkit

Small, dependency-free building blocks for command-line applications in
Python.

## Installation

From a checkout of the project:

```
pip install .
```

## What is inside

- `cmdkit.sorting`: `lexicographic_less(i, j)` orders strings without regard
  to case first. Where two characters differ only in case, the one with the
  lower code point comes first, so upper case sorts before lower case.
- `cmdkit.suggestions`: Jaro and Jaro-Winkler similarity (`jaro_distance`,
  `jaro_winkler`), plus `suggest_flag`, `suggest_command` and `did_you_mean`.
  These give "Did you mean ...?" hints when a user mistypes a flag or a
  command.
  - Flags and commands can be plain name strings, sequences of names, or
    objects with a `names` attribute or method.
  - `suggest_flag` adds `-` or `--` to its answer. It counts `help` and `h`
    as candidates unless `hide_help` is set or `help_names=None`.
  - `suggest_command` always counts `help` and `h` as candidates.
- `cmdkit.value_source`: places where a value can be looked up.
  - `env_var` and `env_vars` read environment variables.
  - `file` and `files` read the whole contents of files.
  - A `ValueSourceChain` returns the first source that has a value.
  - `lookup()` returns the value, or `None` when nothing was found.
  - `ValueSourceChain.lookup_with_source()` returns a `(value, source)`
    tuple, or `None`.
  - `ValueSourceChain.env_keys()` lists the environment variable names in the
    chain.
- `cmdkit.parsing`: `parse_iter` parses arguments with any object that has
  `parse(args)` and `lookup(name)`. The object must raise `FlagParseError`
  on failure. With short-option handling on, an undefined combined option
  such as `-it` is split into `-i -t` when every letter is a known flag, and
  parsing is retried from that argument. The module also provides
  `split_short_options`, `is_splittable` and `flag_from_error`.
- `cmdkit.helptext`: helpers for laying out help text and for shell
  completion.
  - Layout: `wrap`, `wrap_line`, `indent`, `nindent`, `offset`,
    `offset_commands` and `subtract`.
  - Completion: `print_command_suggestions`, `print_flag_suggestions`,
    `cli_arg_contains` and `check_shell_complete_flag`.
  - The completion helpers take the shell name and the argument list as
    parameters. When they are not given, the helpers fall back to the `SHELL`
    environment variable and `sys.argv`. Under zsh, the usage text is written
    after the name.

## Examples

Reading a value from the first source that has one:

```python
from cmdkit.value_source import env_vars, files

chain = env_vars("APP_TOKEN", "TOKEN")
chain.append(files("/etc/app/token"))

found = chain.lookup_with_source()
if found is not None:
    value, source = found
    print(f"read from {source}")
```

Suggesting a command name:

```python
from cmdkit.suggestions import suggest_command, did_you_mean

suggestion = suggest_command(["config", "info"], "conf")
if suggestion:
    print(did_you_mean(suggestion))   # Did you mean "config"?
```

Wrapping help text at a given width:

```python
from cmdkit.helptext import wrap

print(wrap("a fairly long line of usage text that needs wrapping", 3, 30))
```

Detecting a completion request:

```python
from cmdkit.helptext import check_shell_complete_flag

check_shell_complete_flag(True, ["foo", "--generate-shell-completion"])
# (True, ['foo'])
```

## What it does not do

cmdkit has no command or flag types, no argument parser of its own and no
help-template renderer. It offers no command to run either. It supplies the
pieces such a framework is built from: ordering, suggestions, value lookup,
short-option splitting, text layout and completion output. Defining commands,
running them and rendering full help screens is left to the application.

## Running the tests

```
pip install -e .[test]
pytest
```