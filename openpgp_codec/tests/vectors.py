from base64 import b64decode

RSA_N = 0xC0FFEE0123456789ABCDEF0011223345
RSA_E = 65537
KEY_TIMESTAMP = 1234567890

# New-format tag 6 header, then: version 4, timestamp, RSA, MPI n, MPI e
RSA_PUBLIC_KEY_PACKET = bytes.fromhex(
    "c61d" "04" "499602d2" "01" "0080c0ffee0123456789abcdef0011223345" "0011010001"
)
RSA_V4_FINGERPRINT = "3a0a585a0dcdada6443e9f773412bc1df0b02758"
RSA_V4_KEY_ID = "3412bc1df0b02758"
RSA_V3_FINGERPRINT = "10b21cf252da06cc5dbe2af055add816"
RSA_V3_KEY_ID = "abcdef0011223345"

DSA_P = 0x89
DSA_Q = 0x07
DSA_G = 0x02
DSA_Y = 0x0100

DSA_PUBLIC_KEY_PACKET = bytes.fromhex(
    "c613" "04" "499602d2" "11" "000889" "000307" "000202" "00090100"
)
DSA_V4_FINGERPRINT = "11bf89e7c3c400671c804bfd4e8dd34100f7acc3"

ELGAMAL_P = 0x17
ELGAMAL_G = 0x05
ELGAMAL_Y = 0x0F

USER_ID = "Alice <alice@example.org>"
ONE_PASS_KEY_ID = "0123456789abcdef"

# RSA 1024 transferable public key exported by GnuPG 1.4.11: public key,
# user id, positive certification, subkey, subkey binding. Its key id
# B7C32F6760E5CEC0 is published with the key in the pstore test suite.
GNUPG_PUBLIC_KEY_BLOCK = b64decode(
    "mI0EULkrqAEEANNAbAZvH13iidylQmrm3EC1zCj8gm3gWsqK/0a8qKD9sDpjRX/c"
    "zbBzYdd5f1yzw2O1U9rAcnAFbAeBzsAcw2iDLVcnM6HP1F7Hyz1phR7IssmW4unw"
    "JYY75WIWjIvSK3gFcZMQNXWlfANs1nwZ+Z6UxaJDvPR7lPIb3ibUeLufABEBAAG0"
    "JUhhcm0gR2VlcnRzIChURVNUKSA8aGFybUBleGFtcGxlLmNvbT6IuAQTAQIAIgUC"
    "ULkrqAIbLwYLCQgHAwIGFQgCCQoLBBYCAwECHgECF4AACgkQt8MvZ2DlzsAD4AP/"
    "Tbu6Sc7IhmrlRdAN90BnxKNJDU9l8uWLGJ8dsli3pZ6NohdNubYgcwi5zBi3Cj8E"
    "s0vYh8HBxkDPtAUI7vRyhAEw2Chwi1TWlOFEerpl5dNyxoHSDX2TQclnAkUw8KRv"
    "NLujHCK6p4mEjeBOZdn0r/Fs6YHkdN1y1VysnM3rr0C4jQRQuSuoAQQA0/RU/Er7"
    "ksyDndEcYOHOb6eBRGrbe+kIrbMWBRhgVN+FyAih+Zu9hACMFFof3OM2MVkQN8St"
    "vihPzryRZV7HVVJp0LplpzkUGDu5C4iTp1fGKsBZ23F1zfZyETEpMPYCWnKQeNzh"
    "VD6W7FBnSF5jVWy+Ro5oFc7w2cy7mibh0UUAEQEAAYkBPQQYAQIACQUCULkrqAIb"
    "LgCoCRC3wy9nYOXOwJ0gBBkBAgAGBQJQuSuoAAoJEN0HDbSvN/v/K2QD/3IW4Kxd"
    "bOgENnz+ov+aTRO948ooVxy7afdNK5lz41L9596rUSKJr2WFLaqlAQMf7KZTcv+V"
    "O9o+5UIHP5nOU8b2u0zV/FGdCIDSfc18iKOZmVmyCZCgG/JX01ZcianNPDMxu5tF"
    "ITbM+pPleA2LgAjOkRZhmX/ry7WZMNXGjNF0Y7UD/0reXaSJqA+gI0QoXSOYw5Sl"
    "LVs8T2Z40qp7FXhqf91OyhT/bwZHys9BudYZQzwA5a7a/NhyDmZFEk5FdCO7f6wl"
    "xy+EzYGZSKSPl9c0nHaL+ITKb+H65XmJbbxZ1AvzqqQH6k+0dUyJTzZn1qVLYYPP"
    "TeO36hkKrU3I+IJdE+GN"
)
GNUPG_KEY_ID = "b7c32f6760e5cec0"
GNUPG_FINGERPRINT = "312b1995fdbde794cc60eb35b7c32f6760e5cec0"
GNUPG_KEY_TIMESTAMP = 0x50B92BA8
GNUPG_USER_ID = "Harm Geerts (TEST) <harm@example.com>"
