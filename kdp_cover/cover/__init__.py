"""Cover geometry and the renderers/validators that consume it"""
