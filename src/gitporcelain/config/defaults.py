"""Starter .gitporcelain.toml template."""

DEFAULT_TOML = """\
# gitporcelain configuration
version = "1.0"

[parse]
null_terminated = false   # decode `git status -z` output (paths may contain newlines)

[output]
format = "terminal"       # terminal | json
show_summary = true
show_ignored = true
"""
