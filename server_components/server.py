from fastapi import FastAPI, Body, Depends, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import time

#logging stuff
from server_logs.loggers import server_logger
from server_logs.middleware import RequestLoggingMiddleware

from server_components.collection_api import CollectionAPI, build_services
from server_components.config import ServerConfig
from server_components.errors import CardServerError, ValidationError
from server_components.seed import seed_demo_account, DEMO_USERNAME
from server_components.server_classes import RegisterUser, LoginUser, AddCardsRequest

VERSION = "1.0.0"


def create_app(config: Optional[ServerConfig] = None, services: Optional[CollectionAPI] = None) -> FastAPI:
    config = config or ServerConfig.from_env()
    services = services or build_services(config)

    app = FastAPI(title="Card Collection Server", version=VERSION)
    app.state.config = config
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware, logger=server_logger)

    if config.using_dev_secret:
        server_logger.warning("jwt_secret_is_dev_default", env=config.env)

    if config.seed_demo_account and seed_demo_account(services):
        server_logger.info("demo_account_seeded", username=DEMO_USERNAME)

    @app.exception_handler(CardServerError)
    async def card_server_error_handler(request: Request, exc: CardServerError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # malformed bodies get the same {"error", "code"} shape as core failures
        error = ValidationError()
        server_logger.warning("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error.to_content())

    def get_services() -> CollectionAPI:
        return app.state.services

    @app.get("/")
    async def read_root():
        return {"message": "Card Collection Server", "version": VERSION, "health": "/health"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "timestamp": time.time(), "version": VERSION}

    # Handlers below are plain `def` on purpose: FastAPI runs them in its
    # threadpool, and bcrypt would otherwise stall the event loop.

    @app.post("/api/register")
    def register_user(user: Optional[RegisterUser] = Body(None), api: CollectionAPI = Depends(get_services)):
        user = user or RegisterUser()
        return api.register(user.username, user.password, user.email)

    @app.post("/api/login")
    def login_user(user: Optional[LoginUser] = Body(None), api: CollectionAPI = Depends(get_services)):
        user = user or LoginUser()
        return api.login(user.username, user.password)

    @app.get("/api/verify")
    def verify_token(authorization: Optional[str] = Header(None),
                     api: CollectionAPI = Depends(get_services)):
        return api.verify_token(authorization)

    @app.get("/api/cards")
    def list_cards(authorization: Optional[str] = Header(None),
                   api: CollectionAPI = Depends(get_services)):
        return api.list_cards(authorization)

    @app.post("/api/cards")
    def add_cards(req: Optional[AddCardsRequest] = Body(None), authorization: Optional[str] = Header(None),
                  api: CollectionAPI = Depends(get_services)):
        req = req or AddCardsRequest()
        return api.add_cards(authorization, req.cards)

    @app.delete("/api/cards/id/{card_id}")
    def remove_card_by_id(card_id: str, authorization: Optional[str] = Header(None),
                          api: CollectionAPI = Depends(get_services)):
        return api.remove_card_by_id(authorization, card_id)

    @app.delete("/api/cards/{position}")
    def remove_card(position: str, authorization: Optional[str] = Header(None),
                    api: CollectionAPI = Depends(get_services)):
        return api.remove_card(authorization, position)

    server_logger.info("app_created", env=config.env, seeded=config.seed_demo_account)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
