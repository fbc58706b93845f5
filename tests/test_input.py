"""Regression tests for raw-key decoding.

Covers arrow sequences in both CSI and SS3 form, ESC timing, Enter, and
end-of-input handling on the terminal descriptor.
"""

import os
import time
import unittest

from termselect import input as input_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_csi_arrows_are_recognized(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_ss3_arrows_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_carriage_return_and_line_feed_are_enter(self) -> None:
        self.assertEqual(self._read_all(b"\r\n", 2), ["ENTER", "ENTER"])

    def test_printable_keys_pass_through(self) -> None:
        self.assertEqual(self._read_all(b"qhjkl", 5), ["q", "h", "j", "k", "l"])

    def test_ctrl_c_has_its_own_token(self) -> None:
        self.assertEqual(self._read_all(b"\x03", 1), ["CTRL_C"])

    def test_multibyte_character_is_decoded_as_one_key(self) -> None:
        self.assertEqual(self._read_all("éa".encode("utf-8"), 2), ["é", "a"])

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_unsupported_csi_sequence_is_consumed_whole(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[1;5Cq", 2), ["ESC", "q"])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = input_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)
            os.close(write_fd)
        self.assertEqual(key, "")

    def test_end_of_input_raises_eof_error(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with self.assertRaises(EOFError):
                input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
