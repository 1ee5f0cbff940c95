"""Tests for tour reporters."""

import io

import pytest

from ils_tsp.core.rng import MinStdGenerator
from ils_tsp.instance.generator import Instance
from ils_tsp.reporting import MultiReporter, RecordingReporter, TurtleScriptReporter


def test_turtle_header_lists_every_vertex():
    inst = Instance(3, MinStdGenerator(1))
    fd = io.StringIO()
    TurtleScriptReporter(fd, inst)
    lines = fd.getvalue().splitlines()
    assert lines[0] == "import turtle"
    assert lines[1] == "turtle.setworldcoordinates(0, 0, 1000, 1100)"
    assert lines[2] == "p0=(807,249)"
    assert lines[3] == "p1=(73,658)"
    assert len(lines) == 5


def test_turtle_report_draws_closed_tour():
    inst = Instance(3, MinStdGenerator(1))
    fd = io.StringIO()
    reporter = TurtleScriptReporter(fd, inst)
    header = fd.getvalue()

    reporter.report(4, [2, 0, 1], 1234)

    block = fd.getvalue()[len(header):].splitlines()
    assert block == [
        "turtle.clear()",
        "turtle.tracer(0,0)",
        "turtle.penup()",
        "turtle.goto(0,1050)",
        'turtle.write("Total length = 1234")',
        "turtle.speed(0)",
        "turtle.goto(p2)",
        "turtle.pendown()",
        "turtle.goto(p0)",
        "turtle.goto(p1)",
        "turtle.goto(p2)",
        "turtle.update()",
        'wait = input("Enter return to continue")',
    ]


def test_turtle_script_is_valid_python():
    inst = Instance(6, MinStdGenerator(2))
    fd = io.StringIO()
    reporter = TurtleScriptReporter(fd, inst)
    reporter.report(0, [0, 1, 2, 3, 4, 5], 10)
    reporter.report(3, [5, 4, 3, 2, 1, 0], 9)
    compile(fd.getvalue(), "script.py", "exec")


def test_recording_reporter_copies_tours():
    rec = RecordingReporter()
    tour = [1, 0, 2]
    rec.report(0, tour, 7)
    tour.reverse()
    assert rec.events == [(0, [1, 0, 2], 7)]
    assert rec.costs == [7]


def test_multi_reporter_fans_out_in_order():
    calls = []

    class Tagged:
        def __init__(self, tag):
            self.tag = tag

        def report(self, iteration, tour, cost):
            calls.append((self.tag, iteration, cost))

    a, b = RecordingReporter(), RecordingReporter()
    multi = MultiReporter(Tagged("x"), a, Tagged("y"), b)
    multi.report(2, [0, 1], 5)

    assert calls == [("x", 2, 5), ("y", 2, 5)]
    assert a.events == b.events == [(2, [0, 1], 5)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
