from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from revendedores.config.database import Base

class TimestampMixin:
    """Mixin para timestamps automáticos"""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

# ===== USUARIOS =====

class User(Base, TimestampMixin):
    """Dueño del negocio (vendedor). Todo lo demás le pertenece."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    business_name = Column(String(255), nullable=False)
    phone = Column(String(50))
    photo_url = Column(String(500))

    # Relationships
    products = relationship("Product", back_populates="owner")
    orders = relationship("Order", back_populates="owner")
    clients = relationship("Client", back_populates="owner")
    categories = relationship("Category", back_populates="owner")

# ===== CATÁLOGO =====

class Product(Base, TimestampMixin):
    """Producto del inventario"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    cost = Column(Numeric(10, 2))
    # Se descuenta con UPDATE relativo; puede quedar negativo si se sobrevende
    stock = Column(Integer, default=0)
    category = Column(String(255), index=True)
    description = Column(Text, default="")
    barcode = Column(String(255), index=True)
    image = Column(String(500))

    # Relationships
    owner = relationship("User", back_populates="products")

class Category(Base):
    """Etiqueta de categoría; los productos la referencian por nombre"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="categories")

# ===== CLIENTES =====

class Client(Base):
    """Cliente del directorio del vendedor"""
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), default="")
    address = Column(Text, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="clients")
    orders = relationship("Order", back_populates="client")

# ===== PEDIDOS =====

class Order(Base):
    """Pedido/venta creado a partir del carrito"""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=False)
    total_cost = Column(Numeric(10, 2), nullable=False, default=0)
    profit = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="PENDIENTE", index=True)
    method = Column(String(50), nullable=False, default="EFECTIVO")
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"))
    client_name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="orders")
    client = relationship("Client", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        order_by="OrderItem.position",
        cascade="all, delete-orphan"
    )

class OrderItem(Base):
    """Línea del pedido: copia de precio/costo al momento de vender"""
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    # Sin FK: el producto puede borrarse y el pedido conserva su copia
    product_id = Column(Integer)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    cost = Column(Numeric(10, 2), nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=1)
    total = Column(Numeric(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
