# -*- coding: utf-8 -*-
"""
Repositórios do blog sobre uma Session SQLAlchemy.
"""
from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session

from demo_api.models.blog import Post, Comment
from demo_api.schemas.blog import NewPost, PostUpdate, NewComment


class PostRepository:

    def __init__(self, db: Session):
        self.db = db

    def create(self, new_post: NewPost) -> Post:
        now = datetime.utcnow()
        db_post = Post(title=new_post.title, content=new_post.content, created_at=now, updated_at=now)
        self.db.add(db_post)
        self.db.commit()
        self.db.refresh(db_post)
        return db_post

    def find_all(self) -> List[Post]:
        return self.db.query(Post).order_by(Post.id).all()

    def find_by_id(self, post_id: int) -> Optional[Post]:
        return self.db.query(Post).filter(Post.id == post_id).first()

    def update(self, post_id: int, post_update: PostUpdate) -> Optional[Post]:
        db_post = self.find_by_id(post_id)
        if db_post is None:
            return None
        for key, value in post_update.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(db_post, key, value)
        db_post.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(db_post)
        return db_post

    def delete(self, post_id: int) -> bool:
        db_post = self.find_by_id(post_id)
        if db_post is None:
            return False
        self.db.delete(db_post)
        self.db.commit()
        return True


class CommentRepository:

    def __init__(self, db: Session):
        self.db = db

    def create(self, post_id: int, new_comment: NewComment) -> Comment:
        db_comment = Comment(
            post_id=post_id,
            author_name=new_comment.author_name,
            content=new_comment.content,
            created_at=datetime.utcnow()
        )
        self.db.add(db_comment)
        self.db.commit()
        self.db.refresh(db_comment)
        return db_comment

    def find_by_post_id(self, post_id: int) -> List[Comment]:
        return self.db.query(Comment).filter(Comment.post_id == post_id).order_by(Comment.id).all()
