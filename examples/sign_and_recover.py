"""
Copyright (c) 2020, The ThorSig developers
See LICENSE for details

This example script creates a random key pair, signs a message and recovers
the signer's public key from the 65-byte signature alone.
"""

from thorsig.crypto.ecdsasign import SignatureData, signMessage, signedMessageToKey
from thorsig.crypto.keys import ECKeyPair


def main():
    keyPair = ECKeyPair.generate()
    message = "hello thor".encode()

    # The wire form is r (32 bytes) || s (32 bytes) || v (1 byte).
    sigBytes = signMessage(message, keyPair).toBytes()
    print("Public key %s" % keyPair.publicKeyBytes().hex())
    print("Signature  %s" % sigBytes.hex())

    # A verifier holding only the message and the signature.
    recovered = signedMessageToKey(message, SignatureData.fromBytes(sigBytes))
    print("Recovered  %s" % recovered.to_bytes(64, "big").hex())
    print("Match: %s" % (recovered == keyPair.publicKey))


if __name__ == "__main__":
    main()
