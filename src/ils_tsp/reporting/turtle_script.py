"""
Python turtle script export.

Writes a script that, when run, plots the vertices and redraws the tour
each time a new best one was reported, pausing for the return key between
drawings.
"""

from typing import Sequence, TextIO

from ..instance.generator import Instance


class TurtleScriptReporter:
    """
    Tour reporter writing a turtle drawing script to a text stream.

    The header (world coordinates and one ``pK=(x,y)`` line per vertex) is
    written on construction.
    """

    def __init__(self, fd: TextIO, instance: Instance):
        """
        Initialize the reporter and write the script header.

        Args:
            fd: Writable text stream
            instance: Instance whose vertex positions are plotted
        """
        self.fd = fd
        self.max_coord = instance.max_coord
        self._write_header(instance)

    def _write_header(self, instance: Instance) -> None:
        fd = self.fd
        fd.write("import turtle\n")
        fd.write(f"turtle.setworldcoordinates(0, 0, {self.max_coord}, {self.max_coord + 100})\n")
        for v, (x, y) in enumerate(instance.positions):
            fd.write(f"p{v}=({x},{y})\n")

    def report(self, iteration: int, tour: Sequence[int], cost: int) -> None:
        fd = self.fd
        fd.write("turtle.clear()\n")
        fd.write("turtle.tracer(0,0)\n")
        fd.write("turtle.penup()\n")
        fd.write(f"turtle.goto(0,{self.max_coord + 50})\n")
        fd.write(f'turtle.write("Total length = {cost}")\n')
        fd.write("turtle.speed(0)\n")
        fd.write(f"turtle.goto(p{tour[0]})\n")
        fd.write("turtle.pendown()\n")
        for v in tour[1:]:
            fd.write(f"turtle.goto(p{v})\n")
        fd.write(f"turtle.goto(p{tour[0]})\n")
        fd.write("turtle.update()\n")
        fd.write('wait = input("Enter return to continue")\n')
        fd.flush()
