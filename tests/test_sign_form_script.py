"""
Tests for scripts/sign_form.py.
"""
import importlib.util
import os

import pytest

SCRIPT_PATH = os.path.join(os.path.dirname(__file__), '..', 'scripts', 'sign_form.py')


@pytest.fixture
def sign_form(monkeypatch):
    monkeypatch.setenv('CHARGIFY_API_KEY', 'key1')
    monkeypatch.setenv('CHARGIFY_API_SECRET', 's3cr3t')
    spec = importlib.util.spec_from_file_location('sign_form', SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.unit
class TestSignFormScript:
    """Test the signing CLI."""

    def test_sign_prints_fields(self, sign_form, monkeypatch, capsys):
        monkeypatch.setattr('sys.argv', ['sign_form.py', 'sign', 'timestamp=T1', 'nonce=N1', 'amount=100'])

        sign_form.main()

        out = capsys.readouterr().out.splitlines()
        assert out == [
            'api_id=key1',
            'timestamp=T1',
            'nonce=N1',
            'data=amount=100',
            'signature=4117597ece43a4b7e6a14c38f61adb393ec4a2d5',
        ]

    def test_verify_rejects_bad_signature(self, sign_form, monkeypatch, capsys):
        monkeypatch.setattr('sys.argv', [
            'sign_form.py', 'verify', 'status_code=200', 'timestamp=T1', 'nonce=N1',
            'result_code=0', 'call_id=C1', 'signature=bad'
        ])

        with pytest.raises(SystemExit) as exc_info:
            sign_form.main()

        assert exc_info.value.code == 1
        assert 'Verified: False' in capsys.readouterr().out

    def test_verify_accepts_good_signature(self, sign_form, monkeypatch, capsys):
        monkeypatch.setattr('sys.argv', [
            'sign_form.py', 'verify', 'status_code=200', 'timestamp=T1', 'nonce=N1',
            'result_code=0', 'call_id=C1', 'signature=d38d2d70639023f4723e6d740efb1874448f4ae2'
        ])

        sign_form.main()

        out = capsys.readouterr().out
        assert 'Success: True' in out
        assert 'Verified: True' in out

    def test_parse_pairs(self, sign_form):
        assert sign_form.parse_pairs(['a=1', 'b=x=y']) == {'a': '1', 'b': 'x=y'}
