"""业务包集合。"""
