"""
Example usage of modulo_tools.
Demonstrates the plain helpers, the fixed-width Montgomery contexts and a
small RSA round trip through the arbitrary-width context.
"""

import logging

from modulo_tools import Montgomery, Montgomery32, Montgomery64, add_mod, mul_mod, pow_mod, sub_mod

# Mersenne primes; 2 has order 32 mod 65537, so e is coprime to phi(p * q)
P = (1 << 89) - 1
Q = (1 << 107) - 1


def show_context(name, ctx):
    print(f"{name}:")
    print(f"  n:  {ctx.n}")
    print(f"  R:  2^{ctx.radix_bits}")
    print(f"  n': 0x{ctx.np:x}")
    print(f"  R^2 mod n: {ctx.r2}")


def main():
    print("Modular arithmetic with Montgomery multiplication")
    print("=" * 50)

    print(f"add_mod(3, 4, 5)   = {add_mod(3, 4, 5)}")
    print(f"sub_mod(-3, -2, 4) = {sub_mod(-3, -2, 4)}")
    print(f"mul_mod(-2, -3, 4) = {mul_mod(-2, -3, 4)}")
    print(f"pow_mod(2, 6, 7)   = {pow_mod(2, 6, 7)}")
    print()

    m64 = Montgomery64(57)
    show_context("Montgomery64(57)", m64)
    print(f"  5^42 mod 57 = {m64.powmod(5, 42)}")
    print()

    m32 = Montgomery32(89)
    show_context("Montgomery32(89)", m32)
    print(f"  3^57 mod 89 = {m32.powmod(3, 57)}")
    print()

    n = P * Q
    e = 65537
    d = pow(e, -1, (P - 1) * (Q - 1))

    ctx = Montgomery(n)
    show_context(f"Montgomery({n.bit_length()}-bit RSA modulus)", ctx)

    message = 123456789
    ciphertext = ctx.powmod(message, e)
    decrypted = ctx.powmod(ciphertext, d)
    print(f"  message:    {message}")
    print(f"  ciphertext: 0x{ciphertext:x}")
    print(f"  decrypted:  {decrypted}")
    print(f"  matches pow(): {ciphertext == pow(message, e, n)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
