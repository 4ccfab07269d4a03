"""Builders that produce CQL statements and the names of their bound parameters."""