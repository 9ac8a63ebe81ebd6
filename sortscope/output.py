import sys
import textwrap
import threading
import time

import termcolor


show_debug = False


def set_debug(value):
    global show_debug
    show_debug = value


class TimingContext:
    """Prints ``message...`` on entry and the elapsed milliseconds on exit."""

    def __init__(self, outer, message, color="cyan"):
        self.outer = outer
        self.color = color
        self.message = termcolor.colored(f"[{message}...", color)
        self.close = termcolor.colored("]", color)

    def __enter__(self):
        with self.outer.lock:
            self.outer.open_line(self.message, self.close)
            self.outer.contexts.append(self)
            self.start_time = time.perf_counter()

    def __exit__(self, exc_type, exc_value, traceback):
        with self.outer.lock:
            duration = int((time.perf_counter() - self.start_time) * 1000)
            self.outer.contexts.pop()
            self.outer.close_line(
                termcolor.colored(f"{duration} ms", self.color), self.close
            )


class Output(threading.local):
    def __init__(self):
        # Closing text owed to an open timing line, if any.
        self.pending = None
        self.contexts = []
        # None means "whatever sys.stdout is right now", so redirections
        # made after import (pytest, click's test runner) are honored.
        self.file = None
        self.lock = threading.RLock()

    @property
    def pad(self):
        return "  " * len(self.contexts)

    def write(self, message, file=None):
        stream = file or self.file or sys.stdout
        stream.write(message)
        stream.flush()

    def flush(self):
        if self.pending is not None:
            self.write(f"{self.pending}\n")
            self.pending = None

    def open_line(self, message, close):
        self.flush()
        self.write(textwrap.indent(message, self.pad))
        self.pending = close

    # assume message is one line
    def close_line(self, message, close):
        if self.pending is not None:
            self.write(f" {message}{self.pending}\n")
        else:
            self.write(f"{self.pad}[{message}{close}\n")
        self.pending = None

    def _print(self, color, args, start="", end="", file=None):
        self.flush()
        message = " ".join(str(a) for a in args).rstrip()
        lines = f"{start}{message}{end}".split("\n")
        indents = [self.pad] + [self.pad + " " * len(start)] * (len(lines) - 1)
        for indent, line in zip(indents, lines):
            self.write(f"{indent}{termcolor.colored(line, color)}\n", file)

    def log(self, *args):
        with self.lock:
            self._print("cyan", args, start="[", end="]")

    def message(self, *args, file=None):
        with self.lock:
            self._print(None, args, file=file)

    def error(self, *args, file=None):
        with self.lock:
            self._print("red", args, file=file)

    def snapshot(self, values, file=None):
        with self.lock:
            self._print("yellow", [" ".join(str(v) for v in values)], start="  ", file=file)


output = Output()


def log(*message):
    if show_debug:
        output.log(*message)


class EmptyContextManager:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc_value, traceback):
        pass


def timer(key):
    if show_debug:
        return TimingContext(output, key)
    else:
        return EmptyContextManager()
