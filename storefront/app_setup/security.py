from fastapi import FastAPI

STRIPE_SOURCES = ["https://js.stripe.com", "https://checkout.stripe.com"]

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)

        # En-têtes de sécurité
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")

        # CSP: la vitrine redirige vers Stripe Checkout et affiche des images produit externes
        csp = (
            "default-src 'self'; "
            "base-uri 'self'; object-src 'none'; frame-ancestors 'none'; "
            "img-src 'self' data: https:; "
            "style-src 'self' 'unsafe-inline'; "
            f"script-src 'self' 'unsafe-inline' {' '.join(STRIPE_SOURCES)}; "
            f"connect-src 'self' {' '.join(STRIPE_SOURCES)}; "
            f"form-action 'self' {' '.join(STRIPE_SOURCES)}"
        )
        response.headers.setdefault("Content-Security-Policy", csp)

        return response
