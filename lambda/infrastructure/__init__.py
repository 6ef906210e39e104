"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas dos adapters HTTP de entrada e saída
"""
