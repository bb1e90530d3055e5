# zeekit

Building blocks for a terminal text editor, each usable on its own.

- **Selectors** (`zeekit.selector`): parse CSS-like node selectors such as
  `pair > string:nth-child(0), identifier` into `SelectorRaw` values, and
  resolve node kind names to ids with `map_node_kind_names`.
- **Highlighting rules** (`zeekit.rules`): `RawHighlightRules.from_json` reads a
  JSON document mapping selectors to scope patterns (a plain scope string,
  `{"exact": ..., "scopes": ...}`, `{"match": <regex>, "scopes": ...}`, or a
  list of these). `compile` turns it into `HighlightRules` for a language's
  node kind names, and `HighlightRules.matches` picks the scope of the most
  specific rule for a stack of nodes.
- **Errors** (`zeekit.errors`): `HighlightError` and its subclasses
  `SelectorSyntaxError`, `NodeKindNotFoundError` and `RegexSyntaxError`.
- **Modes** (`zeekit.mode`): `find_by_filename` picks a language mode by file
  name, falling back to `PLAIN_TEXT_MODE`.
- **Edit descriptions** (`zeekit.diff`): `OpaqueDiff`, a byte offset with old
  and new lengths, which can be reversed.
- **Window layout** (`zeekit.windows`): `WindowTree` adds, splits, closes and
  cycles focus between windows in nested row and column `Container`s.
- **Settings** (`zeekit.settings`): `settings_path`, `read_settings` (falls
  back to defaults on any problem) and `create_default_file` for a
  `settings.toml` in the user's config directory.
- **Background tasks** (`zeekit.task`): `TaskPool` runs callables on worker
  threads, passing each a unique, increasing task id.
- **Text helpers** (`zeekit.utils`): `graphemes`, `grapheme_width` (tabs count
  as four columns), `strip_trailing_whitespace` and
  `ensure_trailing_newline_with_content`.

## Install

    pip install zeekit

## Examples

Highlighting rules, with node kind names given in id order:

    from zeekit.rules import RawHighlightRules

    raw = RawHighlightRules.from_json("""{
        "name": "JSON",
        "scopes": {
            "pair > string:nth-child(0)": "string.quoted.double.dictionary.key.json",
            "string": "string.quoted.double"
        }
    }""")
    rules = raw.compile(["document", "object", "pair", "string"])

    # Node stack from the innermost node outwards, with each node's sibling index.
    rules.matches([3, 2, 1, 0], [0, 1, 0, 0], '"key"')
    # -> "string.quoted.double.dictionary.key.json"
    rules.matches([3, 2, 1, 0], [2, 1, 0, 0], '"value"')
    # -> "string.quoted.double"

Modes:

    from zeekit.mode import find_by_filename

    find_by_filename("main.rs").name     # "Rust"
    find_by_filename("notes.txt").name   # "Plain"

Windows:

    from zeekit.windows import FlexDirection, WindowTree

    tree = WindowTree()
    tree.add("a")
    tree.insert_at_focused("b", FlexDirection.COLUMN)
    str(tree)            # "<Container Column><a/><b/></Container>"
    tree.get_focused()   # "b"

## What it does not do

The package has no editor program, screen or command of its own. It does not
parse source code: the highlighting rules work on node kind names and ids that
the caller supplies, and modes carry only a name and file name patterns. There
is no undo history, no colour themes and no mapping of scopes to styles.

## Tests

    pip install -e .[test]
    pytest