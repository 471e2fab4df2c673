"""Builders that produce CQL statements together with their parameter names."""