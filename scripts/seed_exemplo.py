"""Popula uma API rodando com um cenário completo de exemplo.

Cria usuário, faz login, cadastra prémio, autor e projeto e avalia o projeto.
Configuração via .env / ambiente: API_BASE_URL, SEED_EMAIL, SEED_SENHA.
"""

import json
import os
from typing import Any, Dict, Optional, Tuple

import requests
from dotenv import load_dotenv


def die(msg: str, code: int = 1) -> None:
    print(f"[ERRO] {msg}")
    raise SystemExit(code)


def env_required(name: str) -> str:
    v = os.getenv(name)
    if not v:
        die(f"Variável de ambiente obrigatória não definida: {name}")
    return v


def call(
    method: str, url: str, token: Optional[str] = None, payload: Optional[Dict[str, Any]] = None
) -> Tuple[int, Any]:
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    resp = requests.request(method, url, json=payload, headers=headers, timeout=30)
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    return resp.status_code, body


def expect(status: int, body: Any, esperado: int, etapa: str) -> Any:
    if status != esperado:
        print(json.dumps(body, ensure_ascii=False, indent=2) if isinstance(body, (dict, list)) else body)
        die(f"{etapa}: esperado {esperado}, recebido {status}", 2)
    print(f"OK {etapa}")
    return body


def login(api: str, email: str, senha: str) -> str:
    # registra (ignora se já existe) e loga
    status, body = call("POST", f"{api}/users", payload={"nome": "Seed", "email": email, "senha": senha})
    if status not in (201, 400):
        die(f"Falha ao registrar usuário: {status} {body}")

    status, body = call("POST", f"{api}/login", payload={"email": email, "senha": senha})
    return expect(status, body, 200, "login")["token"]


def main() -> None:
    load_dotenv()

    api = env_required("API_BASE_URL").rstrip("/")
    email = os.getenv("SEED_EMAIL", "seed@example.com")
    senha = os.getenv("SEED_SENHA", "seed123")

    token = login(api, email, senha)

    premio = expect(
        *call(
            "POST",
            f"{api}/premios",
            token,
            {"nome": "Prémio X", "anoEdicao": 2024, "dataInicio": "2024-01-01", "dataFim": "2024-12-31"},
        ),
        201,
        "prémio criado",
    )

    autor = expect(
        *call(
            "POST",
            f"{api}/autores",
            token,
            {"nome": "Ana Souza", "cpf": "12345678901", "email": "ana.souza@example.com"},
        ),
        201,
        "autor criado",
    )

    projeto = expect(
        *call(
            "POST",
            f"{api}/projetos",
            token,
            {
                "titulo": "T",
                "areaTematica": "TECNOLOGIA",
                "resumo": "Projeto de exemplo",
                "premioId": premio["id"],
                "autorIds": [autor["id"]],
            },
        ),
        201,
        "projeto criado",
    )

    avaliado = expect(
        *call(
            "PATCH",
            f"{api}/projetos/{projeto['id']}/avaliar",
            token,
            {"nota": 9, "parecerDescritivo": "Muito bom.", "situacao": "Avaliado - Aprovado"},
        ),
        200,
        "projeto avaliado",
    )

    print(json.dumps(avaliado, ensure_ascii=False, indent=2))
    print("✅ Seed concluído com sucesso.")


if __name__ == "__main__":
    main()
