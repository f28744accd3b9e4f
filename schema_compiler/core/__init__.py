"""Compiler core: admissibility state, assembler and converter."""
