"""Worked solutions to the exercises, one module per topic."""