"""Flask-SQLAlchemy + FlaskRawQueryPaginator 的最小示例。

运行前准备：
- 确认已安装 flask-sqlalchemy。
- 默认使用 sqlite 文件 `pagination_example.db`，无需额外配置。
- 启动后访问 http://127.0.0.1:5000/posts/recent/2 查看第二页。
"""

from __future__ import annotations

from flask import Flask, abort
from flask_sqlalchemy import SQLAlchemy
from markupsafe import escape
from sqlalchemy.orm import Mapped, mapped_column

from flask_raw_query_paginator import FlaskRawQueryPaginator, init_app


def create_app(db_uri: str) -> tuple[Flask, SQLAlchemy]:
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = db_uri
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    db = SQLAlchemy(app)
    init_app(app)
    return app, db


def main() -> None:
    db_uri = "sqlite:///./pagination_example.db"
    app, db = create_app(db_uri)

    class Post(db.Model):  # type: ignore[misc]
        __tablename__ = "example_post"
        id: Mapped[int] = mapped_column(primary_key=True)
        title: Mapped[str] = mapped_column(db.String(255), nullable=False)
        published: Mapped[bool] = mapped_column(default=True)

    @app.get("/posts/recent", defaults={"page": None})
    @app.get("/posts/recent/<page>")
    def recent_posts(page):
        paginator = (
            FlaskRawQueryPaginator(db=db)
            .set_page_options(5)
            .set_titles({"previous": "Newer", "next": "Older"})
            .set_query(
                "SELECT id, title FROM example_post "
                "WHERE published = :published ORDER BY id DESC",
                {"published": True},
            )
            .execute()
        )
        if not paginator.records and paginator.current_page > 1:
            abort(404)
        items = "".join(f"<li>{escape(row.title)}</li>" for row in paginator.records)
        return f"<ul>{items}</ul>{paginator.render_pages_list() or ''}"

    with app.app_context():
        db.drop_all()
        db.create_all()
        db.session.add_all(Post(title=f"Post #{idx}") for idx in range(1, 43))
        db.session.commit()

    app.run(debug=True)


if __name__ == "__main__":
    main()
