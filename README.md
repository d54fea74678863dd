# saltbox

This package provides small cryptographic building blocks in plain Python. It needs
nothing outside the standard library.

## What is inside

- `saltbox.rng` has two functions. `randombytes_buf(length)` returns `length` random
  bytes. `copy_randombytes(dest)` fills a writable buffer in place. Both use the
  operating system's random source.
- `saltbox.types` has `StackByteArray`, a mutable byte array whose length is fixed when
  it is created. It offers `gen`, `try_from`, `as_slice`, `copy_from_slice` and
  `zeroize`, along with indexing and slicing. The module also has the helpers
  `as_array(data, length)` and `as_mut_array(data, length)`. A size that does not match
  raises `DryocError`.
- `saltbox.utils` has these helpers:
  - `increment_bytes(data)` adds one in place to a little-endian counter and wraps on
    overflow. `sodium_increment` does the same thing.
  - `xor_buf(out, in_)`
  - `load_u64_le` and `load_u32_le`
  - `rotr64(x, b)`
  - `pad16(n)`
- `saltbox.siphash24` has `siphash24(data, key)`. It returns the 8-byte SipHash-2-4 of
  `data` under a 16-byte key.
- `saltbox.poly1305` has `Poly1305`, an incremental one-time authenticator. You create
  it with a 32-byte key, feed data with `update`, and finish with `finalize(output)` or
  `finalize_to_array()`. Finishing wipes the internal state.
- `saltbox.u130` handles 130-bit integers held as five 26-bit limbs, with arithmetic
  modulo 2**130. `U130` is a reduced value and `U130Unreduced` is a product or raw load.
  Both offer `from_bytes` and `*`. `U130` also offers `from_u32_digits` and
  `to_u32_digits`, and `U130Unreduced.reduce()` carries the limbs back into a `U130`.
- `saltbox.sha512` has `Sha512`, a SHA-512 hasher.
  - One-shot class methods: `compute`, `compute_to_vec`, `compute_into_bytes`.
  - Streaming methods: `update`, `finalize`, `finalize_to_vec`, `finalize_into_bytes`.
  - A finalized hasher raises `RuntimeError` if you use it again.
- `saltbox.scalarmult_curve25519` does X25519. It has:
  - `clamp(n)`
  - `crypto_scalarmult_curve25519_base(n)`, which derives a public key.
  - `crypto_scalarmult_curve25519(n, p)`, which computes a shared secret.
- `saltbox.heap` has:
  - `page_size()` and `page_round(size, pagesize)`.
  - `HeapBytes`, a resizable buffer.
  - `HeapByteArray`, a fixed-length buffer.

  Both buffers are overwritten with zeros when they are discarded.
- `saltbox.protected` has `Protected`. It wraps a heap buffer and records a `LockMode`
  (`LOCKED` / `UNLOCKED`) and a `ProtectMode` (`READ_WRITE` / `READ_ONLY` /
  `NO_ACCESS`).
  - Each of `mlock`, `munlock`, `mprotect_readonly`, `mprotect_readwrite` and
    `mprotect_noaccess` consumes the value it is called on and returns a new one.
  - `mprotect_noaccess` is refused on a locked value.
  - The module also has these constructors: `mlock`, `new_locked`,
    `new_readonly_locked`, `gen_locked`, `gen_readonly_locked`,
    `from_slice_into_locked` and `from_slice_into_readonly_locked`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Authenticate a message with Poly1305:

```python
from saltbox.poly1305 import Poly1305

key = bytes(32)  # use a fresh random key per message
mac = Poly1305(key)
mac.update(b"hello")
tag = mac.finalize_to_array()
```

Hash data with SHA-512:

```python
from saltbox.sha512 import Sha512

state = Sha512()
state.update(b"bytes")
digest = state.finalize_to_vec()

assert digest == Sha512.compute_to_vec(b"bytes")
```

Compute a SipHash-2-4 short hash:

```python
from saltbox.siphash24 import siphash24

tag = siphash24(b"some input", bytes(range(16)))  # 8 bytes
```

Derive an X25519 shared secret:

```python
from saltbox.rng import randombytes_buf
from saltbox.scalarmult_curve25519 import (
    crypto_scalarmult_curve25519,
    crypto_scalarmult_curve25519_base,
)

alice_sk = randombytes_buf(32)
bob_sk = randombytes_buf(32)
alice_pk = crypto_scalarmult_curve25519_base(alice_sk)
bob_pk = crypto_scalarmult_curve25519_base(bob_sk)

assert crypto_scalarmult_curve25519(alice_sk, bob_pk) == crypto_scalarmult_curve25519(bob_sk, alice_pk)
```

Keep a value in a locked, read-only buffer:

```python
from saltbox.protected import from_slice_into_readonly_locked

readonly = from_slice_into_readonly_locked(b"some locked bytes")
print(bytes(readonly))
```

Writing to a read-only `Protected` value raises `ProtectionError`. Reading a no-access
value raises the same error. So does using a value that a state change has already
consumed.

Call `zeroize()` to wipe a buffer. Every `Protected` value is also wiped when it is
discarded.

## What it does not do

Lock and protection modes are tracked and enforced inside Python objects only. The
package does not lock pages in RAM and does not change the page permissions of the
process. It does not keep data out of core dumps, and it does not place guard pages
around buffers. `page_size()` and `page_round()` report page arithmetic, but the heap
buffers are ordinary Python byte arrays.