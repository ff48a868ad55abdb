from sqlalchemy import REAL, Column, Integer, Text
from products_api.db import Base

class Product(Base):
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    price = Column(REAL, nullable=False)
    category = Column(Text, nullable=True)
    stock = Column(Integer, nullable=False, default=0, server_default="0")
    description = Column(Text, default="", server_default="")

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
