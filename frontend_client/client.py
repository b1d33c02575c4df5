import requests
from typing import Any, Dict, List, Optional
from frontend_client.utils.pretty_display import (
    print_info, print_error, print_border, print_startup_message, print_main_menu, print_cards
)


class ClientError(Exception):
    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class CollectionClient:
    """Thin wrapper over the card server's REST routes.

    Keeps the bearer token from the last register/login and sends it on
    every collection call.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.token: Optional[str] = None
        self.username: Optional[str] = None

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    def _headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _handle(self, response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not 200 <= response.status_code < 300:
            message = body.get("error") if isinstance(body, dict) else None
            raise ClientError(response.status_code, message or response.text or "Request failed")
        return body

    def _remember(self, body: Dict[str, Any]) -> Dict[str, Any]:
        self.token = body.get("token")
        self.username = body.get("username")
        return body

    def register(self, username: str, email: str, password: str):
        payload = {"username": username, "email": email, "password": password}
        response = self.session.post(self._url("/register"), json=payload)
        return self._remember(self._handle(response))

    def login(self, username: str, password: str):
        payload = {"username": username, "password": password}
        response = self.session.post(self._url("/login"), json=payload)
        return self._remember(self._handle(response))

    def logout(self):
        # tokens are stateless; forgetting it is all there is
        self.token = None
        self.username = None

    def verify(self) -> str:
        response = self.session.get(self._url("/verify"), headers=self._headers())
        return self._handle(response)["username"]

    def list_cards(self) -> List[Dict[str, Any]]:
        response = self.session.get(self._url("/cards"), headers=self._headers())
        return self._handle(response)["cards"]

    def add_cards(self, cards: List[Dict[str, Any]]) -> int:
        response = self.session.post(self._url("/cards"), json={"cards": cards}, headers=self._headers())
        return self._handle(response)["count"]

    def remove_card(self, position: int) -> bool:
        response = self.session.delete(self._url(f"/cards/{position}"), headers=self._headers())
        return self._handle(response)["success"]

    def remove_card_by_id(self, card_id: int) -> bool:
        response = self.session.delete(self._url(f"/cards/id/{card_id}"), headers=self._headers())
        return self._handle(response)["success"]


def _prompt_card() -> Dict[str, str]:
    card = {"name": input("Card name: ").strip()}
    for key, label in (("type", "Type"), ("rarity", "Rarity"), ("setName", "Set")):
        value = input(f"{label} (optional): ").strip()
        if value:
            card[key] = value
    return card


def _sign_in(client: CollectionClient) -> bool:
    print_startup_message()
    choice = input("> ").strip()
    try:
        if choice == "1":
            username = input("Username: ").strip()
            email = input("Email: ").strip()
            password = input("Password: ").strip()
            client.register(username, email, password)
        elif choice == "2":
            username = input("Username: ").strip()
            password = input("Password: ").strip()
            client.login(username, password)
        else:
            return False
    except ClientError as e:
        print_error(e.message)
        return False
    print_info(f"Signed in as {client.username}")
    return True


def main(base_url: str = "http://localhost:5000"):
    client = CollectionClient(base_url)
    while not client.token:
        if not _sign_in(client) and input("Quit? (y/n) ").strip().lower() == "y":
            return

    while True:
        print_main_menu(client.username)
        choice = input("> ").strip()
        try:
            if choice == "1":
                print_cards(client.list_cards())
            elif choice == "2":
                count = client.add_cards([_prompt_card()])
                print_info(f"Added {count} card(s)")
            elif choice == "3":
                # delete by id so a stale listing can't remove the wrong card
                card_id = int(input("Card id to remove: ").strip())
                client.remove_card_by_id(card_id)
                print_info("Card removed")
            elif choice == "4":
                client.logout()
                print_border()
                return
        except ClientError as e:
            print_error(e.message)
        except ValueError:
            print_error("Please enter a number")


if __name__ == "__main__":
    import sys
    main(sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000")
