"""Pydantic schemas"""
from typing import Optional, List, Any
from pydantic import BaseModel, Field
from datetime import datetime


class Category(BaseModel):
    """Category record supplied by the caller"""
    id: str = Field(..., description="Category ID")
    name: str = Field(..., max_length=200, description="Display name (e.g. Kişisel Bakım)")
    image_url: Optional[str] = Field(None, description="Image URL")


class Product(BaseModel):
    """Product (stock) record supplied by the caller"""
    id: str = Field(..., description="Stock ID")
    name: str = Field("", max_length=500, description="Product name")
    barcode: Optional[str] = Field(None, max_length=64, description="Barcode")
    price: float = Field(0, ge=0, description="Sell price")
    category_id: Optional[str] = Field(None, description="Category ID")
    subcategory_id: Optional[str] = Field(None, description="Subcategory ID")


class ScoredCategory(Category):
    """Category with its match score"""
    match_score: float = Field(..., ge=0, le=100, description="Match score (0~100)")


class ScoredProduct(Product):
    """Product with its match score"""
    match_score: float = Field(..., ge=0, le=100, description="Match score (0~100)")


class CategorySearchRequest(BaseModel):
    """Category filter request"""
    query: str = Field("", description="Raw search box value")
    categories: List[Category] = Field(default_factory=list, max_length=5000)
    min_score: Optional[float] = Field(None, ge=0, le=100, description="Threshold (default from settings)")


class ProductSearchRequest(BaseModel):
    """Product search request"""
    query: str = Field("", description="Raw search box value")
    products: List[Product] = Field(default_factory=list, max_length=20000)
    min_score: Optional[float] = Field(None, ge=0, le=100, description="Threshold (default from settings)")


class MatchScoreRequest(BaseModel):
    """Score a single term/target pair"""
    term: str = Field("", description="Search term")
    target: str = Field("", description="Candidate text")
    multi_word: bool = Field(False, description="Use the multi-word ladder")


class MatchScoreData(BaseModel):
    """Score result"""
    term: str
    target: str
    multi_word: bool
    match_score: float = Field(..., ge=0, le=100)


class SearchResponse(BaseModel):
    """Response envelope"""
    status: str = Field(..., description="success | error")
    data: Optional[Any] = Field(None, description="Payload")
    message: str = Field("", description="Message")
    error_code: Optional[str] = Field(None, description="Error code when status is error")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    version: str
