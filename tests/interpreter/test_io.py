"""Tests for bfinterp.interpreter.io — byte sources, sinks and the EOF sentinel."""

from __future__ import annotations

import io

from bfinterp.interpreter.io import (
    EOF,
    BufferSink,
    BufferSource,
    ByteSink,
    ByteSource,
    StreamSink,
    StreamSource,
    TextStreamSource,
)


class TestBufferSource:
    def test_serves_bytes_then_eof(self):
        source = BufferSource(b"ab")
        assert source.read() == ord("a")
        assert source.read() == ord("b")
        assert source.read() == EOF
        assert source.read() == EOF

    def test_str_is_utf8_encoded(self):
        source = BufferSource("é")
        assert source.read() == 0xC3
        assert source.read() == 0xA9
        assert source.remaining == 0

    def test_empty_is_immediately_eof(self):
        assert BufferSource().read() == EOF


class TestBufferSink:
    def test_collects_bytes(self):
        sink = BufferSink()
        for value in (72, 105, 255):
            sink.write(value)
        assert sink.getvalue() == bytes([72, 105, 255])
        assert sink.text() == "Hi\xff"


class TestStreamAdapters:
    def test_stream_source_reads_single_bytes(self):
        source = StreamSource(io.BytesIO(b"\x00\x7f"))
        assert source.read() == 0
        assert source.read() == 127
        assert source.read() == EOF

    def test_stream_sink_writes_bytes(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.write(65)
        sink.write(10)
        assert stream.getvalue() == b"A\n"

    def test_stream_sink_without_flush(self):
        stream = io.BytesIO()
        sink = StreamSink(stream, flush=False)
        sink.write(0)
        assert stream.getvalue() == b"\x00"


class TestTextStreamSource:
    def test_serves_utf8_bytes_of_remaining_text(self):
        stream = io.StringIO("prog\nA\u00e9")
        stream.readline()
        source = TextStreamSource(stream)
        assert source.read() == ord("A")
        assert source.read() == 0xC3
        assert source.read() == 0xA9
        assert source.read() == EOF

    def test_satisfies_protocol(self):
        assert isinstance(TextStreamSource(io.StringIO()), ByteSource)


class TestProtocols:
    def test_adapters_satisfy_protocols(self):
        assert isinstance(BufferSource(), ByteSource)
        assert isinstance(StreamSource(io.BytesIO()), ByteSource)
        assert isinstance(BufferSink(), ByteSink)
        assert isinstance(StreamSink(io.BytesIO()), ByteSink)

    def test_custom_collaborator_satisfies_protocol(self):
        class ConstantSource:
            def read(self) -> int:
                return 7

        assert isinstance(ConstantSource(), ByteSource)

    def test_eof_outside_byte_range(self):
        assert not 0 <= EOF <= 255
