# snakegl

The OpenGL groundwork for a small snake arcade game. It parses OpenGL
version strings, works out which core entry points (up to version 3.3) a
context provides, resolves them through a lookup function you supply, and
answers extension queries. It has no dependencies beyond the standard
library.

## Installing

```
pip install .
```

## Modules

- `snakegl.gl_version`
  - `GLVersion(major, minor)`: a frozen, ordered version;
    `supports(major, minor)` tells whether it is at least that version.
  - `parse_version(text)`: parses a `GL_VERSION` string, skipping a leading
    `OpenGL ES-CM `, `OpenGL ES-CL ` or `OpenGL ES ` prefix. It raises
    `ValueError` for an empty or unparsable string.
  - `version_flags(version)`: maps each core version from 1.0 to 3.3 to
    whether `version` provides it.
  - `max_loaded_version(version)`: the version whose entry points get
    loaded, capped at 3.3.
  - `has_extension(extensions, ext)`: looks a name up in a space-separated
    extension string or in a sequence of names.
- `snakegl.gl_procs_legacy.legacy_entry_points(version)`: the 1.0 to 1.5
  entry-point names for `version`, in load order.
- `snakegl.gl_procs_core.core_entry_points(version)`: the 2.0 to 3.3
  entry-point names for `version`, in load order; names that later versions
  list again appear once.
- `snakegl.gl_loader`
  - `load_gl(load)`: calls `load(name)` for `glGetString`, reads the
    version, then resolves every entry point that version provides. Names
    for which `load` returns `None` are left out. Extensions are read as one
    string below 3.0, and through `glGetIntegerv` and `glGetStringi` from
    3.0 on. It returns a `GLContext`.
  - `GLContext`: holds `version`, `procs` and `extensions`; offers
    `max_loaded`, `flags`, `has_extension(ext)`, `ctx[name]` (raising
    `KeyError` for a name that was not loaded) and `name in ctx`.
  - `GLLoadError`: raised when `glGetString` is missing, the version is
    missing or unparsable, extension queries are unavailable or report
    nothing, or the version is 0.0.

## Example

```python
from snakegl.gl_loader import load_gl


def load(name):
    if name == "glGetString":
        return lambda which: "3.3.0 Mesa"
    if name == "glGetIntegerv":
        return lambda which: 1
    if name == "glGetStringi":
        return lambda which, index: "GL_ARB_debug_output"
    return lambda *args: None


ctx = load_gl(load)
print(ctx.version)                               # 3.3
print(ctx.has_extension("GL_ARB_debug_output"))  # True
print("glDrawArrays" in ctx)                     # True
```

## What it does not do

There is no game here yet: no window, no rendering, no shader handling, no
snake, apples or collision checks, and no command to start anything. The
package only decides which OpenGL functions a context offers and gathers
them from the lookup function it is given; it does not open a context or
call into any OpenGL library by itself.

## Running the tests

```
pip install .[test]
pytest
```