# -*- coding: utf-8 -*-
"""
Rotas FastAPI da API de blog: posts e comentários.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from demo_api.database import get_db
from demo_api.routes.params import parse_id
from demo_api.repositories.blog import PostRepository, CommentRepository
from demo_api.schemas.blog import (NewPost, PostUpdate, PostRead, NewComment,
                                   CommentRead, PostWithComments)

router = APIRouter(
    tags=["Blog"],
    responses={404: {"description": "Post não encontrado"}},
)


# --- CRUD Endpoints ---

@router.get("/posts", response_model=List[PostRead])
def read_posts(db: Session = Depends(get_db)):
    return PostRepository(db).find_all()

@router.post("/posts", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(new_post: NewPost, db: Session = Depends(get_db)):
    return PostRepository(db).create(new_post)

@router.get("/posts/{post_id}", response_model=PostWithComments)
def read_post(post_id: str, db: Session = Depends(get_db)):
    """
    Retorna o post com a lista de comentários.
    """
    pid = parse_id(post_id, "Invalid ID")
    db_post = PostRepository(db).find_by_id(pid)
    if db_post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    comments = CommentRepository(db).find_by_post_id(pid)
    return {"post": db_post, "comments": comments}

@router.put("/posts/{post_id}", response_model=PostRead)
def update_post(post_id: str, post_update: PostUpdate, db: Session = Depends(get_db)):
    pid = parse_id(post_id, "Invalid ID")
    db_post = PostRepository(db).update(pid, post_update)
    if db_post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return db_post

@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: str, db: Session = Depends(get_db)):
    pid = parse_id(post_id, "Invalid ID")
    if not PostRepository(db).delete(pid):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return None

# --- Comentários ---

@router.post("/posts/{post_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def create_comment(post_id: str, new_comment: NewComment, db: Session = Depends(get_db)):
    pid = parse_id(post_id, "Invalid Post ID")
    if PostRepository(db).find_by_id(pid) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return CommentRepository(db).create(pid, new_comment)
