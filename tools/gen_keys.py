from pathlib import Path
import sys

from authtoken.core.crypto import generate_key_pair

keys_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "keys")
priv, pub = generate_key_pair(keys_dir)
print(f"private: {priv}")
print(f"public:  {pub}")
