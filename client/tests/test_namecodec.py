"""
Unit tests for the namecodec command line script.
"""

import json
import sys
from pathlib import Path

# Add parent and scripts directories to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'scripts'))

from namecodec import main
from starkname.network import NAMING_CONTRACTS, SEPOLIA


class TestCommands:
    """Tests for each subcommand."""

    def test_encode(self, capsys):
        assert main(['encode', 'fricoben']) == 0
        out = capsys.readouterr().out
        assert '[+] value: 1499554868251' in out
        assert '[+] hex: 0x15d246f6c1b' in out

    def test_decode_hex(self, capsys):
        assert main(['decode', '0x15d246f6c1b']) == 0
        assert '[+] label: fricoben' in capsys.readouterr().out

    def test_encode_domain_json(self, capsys):
        assert main(['--json', 'encode-domain', 'fricoben.stark']) == 0
        result = json.loads(capsys.readouterr().out)
        assert result['values'] == [1499554868251]

    def test_decode_domain(self, capsys):
        assert main(['decode-domain', '1499554868251']) == 0
        assert '[+] domain: fricoben.stark' in capsys.readouterr().out

    def test_contract(self, monkeypatch, capsys):
        monkeypatch.delenv('STARKNAME_CONTRACT', raising=False)
        assert main(['contract', '--network', 'sepolia']) == 0
        assert hex(NAMING_CONTRACTS[SEPOLIA]) in capsys.readouterr().out

    def test_contract_override(self, capsys):
        assert main(['contract', '--contract', '0x1234']) == 0
        assert '[+] contract: 0x1234' in capsys.readouterr().out


class TestErrors:
    """Errors are reported, not raised."""

    def test_unknown_character(self, capsys):
        assert main(['encode', 'fri$coben']) == 1
        assert "[!] Unknown character '$'" in capsys.readouterr().out

    def test_bad_value(self, capsys):
        assert main(['decode', 'nope']) == 1
        assert '[!]' in capsys.readouterr().out

    def test_unknown_network(self, capsys):
        assert main(['contract', '--network', 'goerli', '--contract', '']) == 1
        assert '[!]' in capsys.readouterr().out
