import sqlite3
import sys

DB = sys.argv[1] if len(sys.argv) > 1 else "products.db"
LIMIT = int(sys.argv[2]) if len(sys.argv) > 2 else 20

conn = sqlite3.connect(DB)
cur = conn.cursor()

print("=== products columns ===")
cur.execute("PRAGMA table_info(products)")
cols = cur.fetchall()
if not cols:
    print("no products table in", DB)
    conn.close()
    sys.exit(1)
for c in cols:
    print({"cid": c[0], "name": c[1], "type": c[2], "notnull": bool(c[3]), "default": c[4], "pk": bool(c[5])})

cur.execute("SELECT COUNT(*) FROM products")
print("\n=== Recent products (total %d) ===" % cur.fetchone()[0])
cur.execute("SELECT * FROM products ORDER BY id DESC LIMIT ?", (LIMIT,))
names = [d[0] for d in cur.description]
for r in cur.fetchall():
    print(dict(zip(names, r)))

conn.close()
