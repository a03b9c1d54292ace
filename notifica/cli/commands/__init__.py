"""
Pacote de comandos do CLI notifica.

Cada arquivo neste diretório implementa um subcomando:
- serve_cmd.py → notifica serve
- check_cmd.py → notifica check
"""
