# GUI package, the declarative screens live in gui.v1
