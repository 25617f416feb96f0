# -*- coding: utf-8 -*-
"""
Schemas Pydantic para o blog. Os campos são expostos em camelCase na API.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

class NewPost(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str

class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None

class PostRead(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class NewComment(BaseModel):
    author_name: str = Field(..., alias="authorName", min_length=1, max_length=100)
    content: str

    class Config:
        populate_by_name = True

class CommentRead(BaseModel):
    id: int
    post_id: int = Field(..., alias="postId")
    author_name: str = Field(..., alias="authorName")
    content: str
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


# Retorno de GET /blog/posts/{id}
class PostWithComments(BaseModel):
    post: PostRead
    comments: List[CommentRead] = []
