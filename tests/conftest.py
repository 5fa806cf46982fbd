"""Shared fixtures: an in-memory EditorHost that records every side effect."""

from pathlib import Path

import pytest

from component_creator.editor import EditorHost, TextDocument


class FakeHost(EditorHost):
    def __init__(self, document=None, cursor_line=0, prompt_answers=None):
        self.document = document
        self._cursor_line = cursor_line
        self.prompt_answers = list(prompt_answers or [])
        self.prompt_calls = 0
        self.existing = set()
        self.written = {}
        self.inserts = []
        self.infos = []
        self.errors = []
        self.write_result = True
        self.write_exception = None
        self.insert_exception = None

    def active_document(self):
        return self.document

    def cursor_line(self):
        return self._cursor_line

    def prompt_component_name(self):
        self.prompt_calls += 1
        return self.prompt_answers.pop(0) if self.prompt_answers else None

    def file_exists(self, path):
        return Path(path) in self.existing or Path(path) in self.written

    def write_file(self, path, content):
        if self.write_exception:
            raise self.write_exception
        if self.write_result:
            self.written[Path(path)] = content
        return self.write_result

    def insert_text(self, document, position, text):
        if self.insert_exception:
            raise self.insert_exception
        self.inserts.append((document.path, position, text))

    def show_info(self, message):
        self.infos.append(message)

    def show_error(self, message):
        self.errors.append(message)


@pytest.fixture
def make_document():
    def _make(text, path="/project/src/App.tsx"):
        return TextDocument(path=Path(path), text=text)

    return _make


@pytest.fixture
def make_host(make_document):
    def _make(text=None, cursor_line=0, prompt_answers=None, path="/project/src/App.tsx"):
        document = make_document(text, path) if text is not None else None
        return FakeHost(document, cursor_line, prompt_answers)

    return _make
