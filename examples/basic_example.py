#!/usr/bin/env python3
"""
Basic example demonstrating the tls-keygen workflow:
1. Generate keys for every supported algorithm
2. Read the PEM and OpenSSH outputs
3. Load a private key back and check it against its public key
"""

from tls_keygen import PrivateKeyResource, KeyRequest, generate, parse_private_key_pem
from tls_keygen.core import InvalidParameterError, pem_decode


def main():
    print("=== tls-keygen - Basic Example ===\n")

    # ============================================================================
    # STEP 1: Generate one key per algorithm
    # ============================================================================
    print("1. Generating keys...")
    requests = [
        {"algorithm": "RSA"},
        {"algorithm": "ECDSA", "ecdsa_curve": "P224"},
        {"algorithm": "ECDSA", "ecdsa_curve": "P256"},
        {"algorithm": "ED25519"},
    ]
    for params in requests:
        material = generate(**params)
        label = " ".join(str(v) for v in params.values())
        print(f"   ✓ {label}")
        print(f"     private: {material.private_key_pem.splitlines()[0]}")
        print(f"     public:  {material.public_key_pem.splitlines()[0]}")
        if material.ssh:
            print(f"     openssh: {material.public_key_openssh[:40]}...")
            print(f"     md5:     {material.public_key_fingerprint_md5}")
        else:
            print("     openssh: (none for this curve)")
    print()

    # ============================================================================
    # STEP 2: Round-trip a private key
    # ============================================================================
    print("2. Parsing an Ed25519 private key back...")
    material = generate("ED25519")
    pair = parse_private_key_pem("ED25519", material.private_key_pem)
    matches = pair.public_der() == pem_decode(material.public_key_pem, "PUBLIC KEY")
    print(f"   ✓ Public key matches: {matches}\n")

    # ============================================================================
    # STEP 3: Resource lifecycle
    # ============================================================================
    print("3. Creating a key resource...")
    resource = PrivateKeyResource()
    state = resource.create(KeyRequest(algorithm="ECDSA", ecdsa_curve="P384"))
    print(f"   ✓ Resource id: {state.id}")
    changed = KeyRequest(algorithm="ECDSA", ecdsa_curve="P521")
    print(f"   ✓ Changing the curve requires a new key: {resource.requires_replacement(changed)}")
    resource.delete()
    print("   ✓ Deleted\n")

    # ============================================================================
    # STEP 4: Invalid parameters
    # ============================================================================
    print("4. Requesting an unknown curve...")
    try:
        generate("ECDSA", ecdsa_curve="P999")
    except InvalidParameterError as e:
        print(f"   ✓ Rejected: {e}\n")

    print("=== Example completed ===")


if __name__ == "__main__":
    main()
