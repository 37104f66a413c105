"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

Configuration settings for the thorsig command. Settings are read from an
INI-formatted file in the OS-appropriate data directory and can be overridden
on the command line.
"""

import argparse
import logging
import os
import sys

from appdirs import AppDirs

from thorsig.crypto import hashing
from thorsig.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("ThorSig", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "thorsig.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

# Keys recognized in the configuration file.
FILE_KEYS = ("hash", "nonce", "loglevel")

NONCE_RFC6979 = "rfc6979"
NONCE_RANDOM = "random"

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}

log = helpers.getLogger("CONFIG")


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.lower()]


def fileSettings(path):
    """
    Read the recognized settings from the configuration file.

    Args:
        path (str): The configuration file path.

    Returns:
        dict: The settings found. Empty if the file doesn't exist.
    """
    if not path or not os.path.isfile(path):
        return {}
    return helpers.readINI(path, FILE_KEYS)


def buildParser():
    """
    The argument parser for the thorsig command.

    Returns:
        argparse.ArgumentParser: The parser.
    """
    parser = argparse.ArgumentParser(
        prog="thorsig",
        description="Recoverable secp256k1 signatures in r || s || v form.",
    )
    parser.add_argument("--config", help="path to a configuration file")
    parser.add_argument(
        "--hash",
        choices=sorted(hashing.HASHERS),
        help=f"message hash function (default {hashing.DEFAULT_HASH})",
    )
    parser.add_argument(
        "--random-nonce",
        action="store_true",
        help="sign with a random nonce instead of an RFC 6979 nonce",
    )
    parser.add_argument("--loglevel", help="LEVEL or module:LEVEL,module:LEVEL")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    pubkey = subparsers.add_parser("pubkey", help="derive a public key")
    pubkey.add_argument("privkey", help="hex-encoded private key")

    msgFlags = argparse.ArgumentParser(add_help=False)
    msgFlags.add_argument(
        "--hex", action="store_true", help="the message is hex-encoded bytes"
    )
    msgFlags.add_argument(
        "--prehashed",
        action="store_true",
        help="the message is already a 32-byte digest and is not hashed",
    )

    sign = subparsers.add_parser("sign", parents=[msgFlags], help="sign a message")
    sign.add_argument("privkey", help="hex-encoded private key")
    sign.add_argument("message")

    recover = subparsers.add_parser(
        "recover", parents=[msgFlags], help="recover a public key from a signature"
    )
    recover.add_argument("signature", help="hex-encoded 65-byte signature")
    recover.add_argument("message")
    return parser


class CmdArgs:
    """
    CmdArgs are the command-line configuration options, layered over the
    settings file.
    """

    def __init__(self, argv=None, configPath=None):
        """
        Args:
            argv (list(str)): optional. The arguments, without the program
                name. Default is sys.argv[1:].
            configPath (str): optional. The settings file used when --config
                is not given. Default is CONFIG_PATH.
        """
        args = buildParser().parse_args(sys.argv[1:] if argv is None else argv)
        self.args = args
        self.command = args.command
        self.configPath = args.config or configPath or CONFIG_PATH

        if args.config and not os.path.isfile(args.config):
            sys.exit(f"configuration file not found: {args.config}")
        settings = fileSettings(self.configPath)
        if settings:
            log.debug(f"loaded settings {sorted(settings)} from {self.configPath}")

        self.hashName = args.hash or settings.get("hash", hashing.DEFAULT_HASH)
        if self.hashName.lower() not in hashing.HASHERS:
            sys.exit(f"unknown hash function: {self.hashName}")
        self.hashName = self.hashName.lower()

        nonce = settings.get("nonce", NONCE_RFC6979).lower()
        if nonce not in (NONCE_RFC6979, NONCE_RANDOM):
            sys.exit(f"unknown nonce type: {nonce}")
        self.deterministic = nonce == NONCE_RFC6979 and not args.random_nonce

        self.logLevel = logging.INFO
        self.moduleLevels = {}
        loglevel = args.loglevel or settings.get("loglevel")
        if loglevel:
            try:
                if any(ch in loglevel for ch in (",", ":")):
                    pairs = (s.split(":") for s in loglevel.split(","))
                    self.moduleLevels = {k: logLvl(v) for k, v in pairs}
                else:
                    self.logLevel = logLvl(loglevel)
            except (KeyError, ValueError):
                sys.exit(f"malformed loglevel specifier: {loglevel}")


cmdArgs = None


def load(argv=None):
    """
    Load and return the current command-line configuration. The configuration
    is only loaded once. Successive calls to the modular `load` function will
    return the same instance.

    Returns:
        CmdArgs: The current command-line configuration.
    """
    global cmdArgs
    if not cmdArgs:
        cmdArgs = CmdArgs(argv)
    return cmdArgs
