"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

The thorsig command. Derive public keys, sign messages and recover signers.
"""

import sys

from thorsig import ThorSigError, config
from thorsig.crypto.ecdsasign import SignatureData, signMessage, signedMessageToKey
from thorsig.crypto.keys import ECKeyPair
from thorsig.util import helpers
from thorsig.util.encode import decodeBytes, toBytesPadded


log = helpers.getLogger("CLI")


def _message(cfg):
    if cfg.args.hex:
        return decodeBytes(cfg.args.message)
    return cfg.args.message.encode("utf-8")


def _keyPair(cfg):
    return ECKeyPair.create(decodeBytes(cfg.args.privkey), cfg.deterministic)


def pubkey(cfg):
    return _keyPair(cfg).publicKeyBytes().hex()


def sign(cfg):
    sigData = signMessage(
        _message(cfg),
        _keyPair(cfg),
        needToHash=not cfg.args.prehashed,
        hashName=cfg.hashName,
    )
    return sigData.hex()


def recover(cfg):
    sigData = SignatureData.fromBytes(decodeBytes(cfg.args.signature))
    key = signedMessageToKey(
        _message(cfg),
        sigData,
        needToHash=not cfg.args.prehashed,
        hashName=cfg.hashName,
    )
    return toBytesPadded(key, 64).hex()


COMMANDS = {
    "pubkey": pubkey,
    "sign": sign,
    "recover": recover,
}


def main(argv=None):
    """
    Run a thorsig command with the loaded configuration. The result is
    printed to stdout.

    Args:
        argv (list(str)): optional. The arguments, without the program name.

    Returns:
        int: The exit status.
    """
    cfg = config.load(argv)
    helpers.prepareLogging(logLvl=cfg.logLevel, lvlMap=cfg.moduleLevels)
    try:
        print(COMMANDS[cfg.command](cfg))
    except ThorSigError as e:
        log.debug(helpers.formatTraceback(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
