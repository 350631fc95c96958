# Monlox: a small dynamically-typed scripting language evaluated by walking
# the syntax tree.
#
# Layout:
# - monlox.reader:     lexer, AST node classes, Pratt parser.
# - monlox.types:      runtime objects and lexical environments.
# - monlox.evaluation: the tree-walking evaluator and operator tables.
# - monlox.builtins:   the fixed native-function table.
#
# The evaluator never raises for language-level failures; it returns an
# `Error` object instead. Host-level failures (bad syntax) raise MonloxError.

__version__ = "0.1.0"
