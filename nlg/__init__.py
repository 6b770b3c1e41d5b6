# nlg/__init__.py
