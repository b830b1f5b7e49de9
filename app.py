import logging

from flask import Flask, render_template, request, redirect, url_for, flash, jsonify

from models import OpType
from queue_playground import QueuePlayground

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_mapping(SECRET_KEY="dev-secret-key")
# QUEUE_LAB_SECRET_KEY などの環境変数で上書きできる
app.config.from_prefixed_env("QUEUE_LAB")

# ※ メモリ上だけ（サーバー再起動で消える）
playground = QueuePlayground()


def _describe(value) -> str:
    return "（空）" if value is None else str(value)


# -------------------------
# 画面
# -------------------------
@app.route("/", methods=["GET"])
def dashboard():
    return render_template(
        "dashboard.html",
        state=playground.snapshot(),
        history=list(reversed(playground.history())),
        mismatches=playground.mismatches(),
        OpType=OpType,
    )


# -------------------------
# 操作
# -------------------------
@app.route("/enqueue", methods=["POST"])
def enqueue():
    value = (request.form.get("value") or "").strip()
    if not value:
        logger.warning("enqueue rejected: blank value")
        flash("請輸入要加入佇列的值", "error")
        return redirect(url_for("dashboard"))

    playground.enqueue(value)
    flash(f"已加入佇列：{value}", "success")
    return redirect(url_for("dashboard"))


@app.route("/dequeue", methods=["POST"])
def dequeue():
    if playground.size() == 0:
        # 空でも記録は残す（両方 None になることを確認できる）
        playground.dequeue()
        logger.info("dequeue on empty queue")
        flash("佇列是空的", "error")
        return redirect(url_for("dashboard"))

    record = playground.dequeue()
    flash(f"已取出：{_describe(record.array_result)}", "success")
    return redirect(url_for("dashboard"))


@app.route("/peek", methods=["POST"])
def peek():
    if playground.size() == 0:
        playground.peek()
        logger.info("peek on empty queue")
        flash("佇列是空的", "error")
        return redirect(url_for("dashboard"))

    record = playground.peek()
    msg = f"目前最前面：{_describe(record.array_result)}"
    if record.transferred:
        msg += f"（搬移 {record.transferred} 個元素）"
    flash(msg, "success")
    return redirect(url_for("dashboard"))


@app.route("/reset", methods=["POST"])
def reset():
    playground.reset()
    flash("已重設", "success")
    return redirect(url_for("dashboard"))


# -------------------------
# JSON
# -------------------------
@app.route("/api/state", methods=["GET"])
def api_state():
    state = playground.snapshot()
    state["history"] = [r.to_dict() for r in playground.history()]
    state["mismatches"] = len(playground.mismatches())
    return jsonify(state)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
