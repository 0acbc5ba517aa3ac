"""Small character, string, memory, output and linked-list helpers used by the solver."""