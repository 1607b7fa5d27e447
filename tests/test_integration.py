from __future__ import annotations

from itertools import combinations

from delgamal import Dec, Enc, KeyGen, Recover, make_params
from delgamal.codec import (
    decode_ciphertext,
    decode_decryption_share,
    decode_key_share,
    decode_public_key,
    encode_ciphertext,
    encode_decryption_share,
    encode_key_share,
    encode_public_key,
)


# End-to-end with production-size parameters, catching anything the
# handcrafted toy values might hide.
def test_integration_1024_256():
    params = make_params()
    msg = b"Hello world".ljust(64, b"\x00")

    pub, priv, key_shares = KeyGen(params, 1024, 256, 3, 6)
    priv.destroy()
    assert pub.p.bit_length() == 1024
    assert pub.q.bit_length() == 256

    ctxt = Enc(params, pub, msg)
    dec_shares = [Dec(params, pub, s, ctxt) for s in key_shares]

    for subset in combinations(dec_shares, 4):
        assert Recover(params, pub, list(subset), ctxt) == msg


def test_integration_over_the_wire():
    params = make_params()
    msg = bytes(64)

    pub, priv, key_shares = KeyGen(params, 512, 160, 1, 3)
    priv.destroy()

    # dealer -> custodians, dealer -> public
    pub_wire = encode_public_key(pub)
    shares_wire = [encode_key_share(s) for s in key_shares]

    ctxt_wire = encode_ciphertext(Enc(params, decode_public_key(pub_wire), msg))

    # each custodian decodes its own share and the ciphertext
    dec_wire = []
    for raw in shares_wire[1:]:
        share = decode_key_share(raw)
        dec_wire.append(encode_decryption_share(Dec(params, pub, share, decode_ciphertext(ctxt_wire))))

    dec_shares = [decode_decryption_share(raw) for raw in dec_wire]
    assert Recover(params, pub, dec_shares, decode_ciphertext(ctxt_wire)) == msg
