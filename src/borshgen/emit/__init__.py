"""Emitter — renders layouts into TypeScript class and schema-table text."""
