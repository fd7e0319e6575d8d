"""Single-user command-line inventory tracker."""
